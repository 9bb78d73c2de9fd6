"""FileWriter: writes generated content without clobbering existing files."""

import os

from dpgen.generate.errors import AlreadyExistsError
from dpgen.generate.filesystem import LocalFilesystem


class FileWriter:
    """Creates parent directories and writes files through a filesystem.

    Args:
        filesystem: Object providing exists/read/write/make_directory.
            Defaults to LocalFilesystem.
    """

    def __init__(self, filesystem=None):
        self._filesystem = filesystem or LocalFilesystem()

    def exists(self, path: str) -> bool:
        return self._filesystem.exists(path)

    def write(self, path: str, content: str, force: bool = False) -> None:
        """Write *content* to *path*.

        Raises:
            AlreadyExistsError: If the file exists and *force* is False
            OSError: If the directory or file cannot be written
        """
        if not force and self._filesystem.exists(path):
            raise AlreadyExistsError(path)
        directory = os.path.dirname(path)
        if directory:
            self._filesystem.make_directory(directory)
        self._filesystem.write(path, content)
