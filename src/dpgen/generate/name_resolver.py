"""Turn a user-supplied class name into a qualified module path and file path."""

import keyword
import os
from dataclasses import dataclass

from dpgen.generate.errors import InvalidNameError, ReservedNameError
from dpgen.generate.generation_request import EntityKind


@dataclass(frozen=True)
class ResolvedTarget:
    qualified_class_name: str
    file_path: str
    namespace: str

    @property
    def class_name(self) -> str:
        return self.qualified_class_name.rsplit(".", 1)[-1]


def normalize_name(raw_name: str) -> str:
    """Trim whitespace and turn ``.`` and ``\\`` separators into ``/``."""
    name = raw_name.strip().replace(".", "/").replace("\\", "/")
    return name.strip("/")


class NameResolver:
    """Resolves names for one entity kind beneath a root package.

    ``Admin.User`` for a repository under root package ``app`` resolves to
    ``app.Repositories.Admin.User`` written to
    ``<base_path>/app/Repositories/Admin/User.py``.
    """

    def __init__(self, entity_kind: EntityKind, base_path: str,
                 root_package: str = "app", extension: str = ".py"):
        self._entity_kind = entity_kind
        self._base_path = base_path
        self._root_package = root_package
        self._extension = extension

    @property
    def default_namespace(self) -> str:
        return f"{self._root_package}.{self._entity_kind.default_package}"

    def resolve(self, raw_name: str) -> ResolvedTarget:
        """Resolve *raw_name* to a ResolvedTarget.

        Raises:
            ReservedNameError: If any segment is a Python keyword
            InvalidNameError: If any segment is not a valid identifier
        """
        name = normalize_name(raw_name)
        segments = name.split("/")
        if any(keyword.iskeyword(segment) for segment in segments):
            raise ReservedNameError(f'The name "{name}" is reserved by Python.')
        if not all(segment.isidentifier() for segment in segments):
            raise InvalidNameError(f'The name "{name}" is not a valid Python class name.')

        if segments[0] == self._root_package and len(segments) > 1:
            qualified_parts = segments
        else:
            qualified_parts = self.default_namespace.split(".") + segments

        file_path = os.path.join(self._base_path, *qualified_parts) + self._extension
        return ResolvedTarget(
            qualified_class_name=".".join(qualified_parts),
            file_path=file_path,
            namespace=".".join(qualified_parts[:-1]),
        )


def interface_path_for(target: ResolvedTarget) -> str:
    """Return ``<dir>/Interfaces/<Name>Interface<ext>`` next to the main file."""
    directory, filename = os.path.split(target.file_path)
    extension = os.path.splitext(filename)[1]
    return os.path.join(directory, "Interfaces", f"{target.class_name}Interface{extension}")
