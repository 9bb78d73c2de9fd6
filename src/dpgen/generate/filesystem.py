"""LocalFilesystem: the on-disk implementation used by FileWriter.

Kept behind a small interface so tests can pass FakeFilesystem instead.
"""

import os


class LocalFilesystem:
    """Thin wrapper over os and open()."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def read(self, path: str) -> str:
        with open(path, encoding="utf-8") as f:
            return f.read()

    def write(self, path: str, content: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)

    def make_directory(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)
