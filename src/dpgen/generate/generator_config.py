"""Generator configuration: project root discovery and the optional .dpgen.json file."""

import json
import os
from dataclasses import dataclass, fields, replace

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

CONFIG_FILE_NAME = ".dpgen.json"


@dataclass(frozen=True)
class GeneratorConfig:
    """Where generated files go and how names are qualified."""

    base_path: str
    root_package: str = "app"
    models_package: str = "Models"
    tests_dir: str = "tests"
    matching_tests: bool = False

    @property
    def stubs_dir(self) -> str:
        return os.path.join(self.base_path, "stubs")

    def with_overrides(self, **overrides) -> "GeneratorConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def find_project_root(start: str) -> str:
    """Return the Git working tree containing *start*, or *start* itself."""
    try:
        repo = Repo(start, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return start
    return repo.working_tree_dir or start


def load_generator_config(base_path: str) -> GeneratorConfig:
    """Build a GeneratorConfig for *base_path*, applying .dpgen.json if present.

    Raises:
        ValueError: If the file is not a JSON object, has unknown keys or
            has values of the wrong type
    """
    path = os.path.join(base_path, CONFIG_FILE_NAME)
    if not os.path.isfile(path):
        return GeneratorConfig(base_path=base_path)

    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path}: invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")

    field_types = {item.name: item.type for item in fields(GeneratorConfig) if item.name != "base_path"}
    unknown = sorted(set(data) - set(field_types))
    if unknown:
        raise ValueError(f"{path}: unknown keys: {', '.join(unknown)}")

    mistyped = sorted(key for key, value in data.items() if type(value) is not field_types[key])
    if mistyped:
        raise ValueError(f"{path}: wrong value type for: {', '.join(mistyped)}")

    return GeneratorConfig(base_path=base_path, **data)
