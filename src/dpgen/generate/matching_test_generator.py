"""MatchingTestGenerator: writes a pytest stub for a generated class."""

import os
import re

from dpgen.generate.errors import AlreadyExistsError
from dpgen.generate.file_writer import FileWriter
from dpgen.generate.generation_request import ArtifactResult, EntityKind
from dpgen.generate.name_resolver import ResolvedTarget
from dpgen.templates.template_renderer import render_template

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class MatchingTestGenerator:
    """Creates ``<base>/<tests_dir>/<Kind>/.../test_<name>.py``.

    The test tree mirrors the qualified name below the root package. An
    existing test file is never overwritten.
    """

    def __init__(self, base_path: str, root_package: str = "app",
                 tests_dir: str = "tests", file_writer: FileWriter | None = None):
        self._base_path = base_path
        self._root_package = root_package
        self._tests_dir = tests_dir
        self._file_writer = file_writer or FileWriter()

    def test_path(self, target: ResolvedTarget) -> str:
        parts = target.namespace.split(".")
        if parts and parts[0] == self._root_package:
            parts = parts[1:]
        filename = f"test_{snake_case(target.class_name)}.py"
        return os.path.join(self._base_path, self._tests_dir, *parts, filename)

    def generate(self, target: ResolvedTarget, entity_kind: EntityKind) -> ArtifactResult:
        path = self.test_path(target)
        content = render_template(
            "matching_test.py.j2",
            package=__package__,
            module=target.qualified_class_name,
            class_name=target.class_name,
            kind=entity_kind.label.split()[0].lower(),
        )
        try:
            self._file_writer.write(path, content)
        except AlreadyExistsError:
            return ArtifactResult(created=False, path=path)
        return ArtifactResult(created=True, path=path)
