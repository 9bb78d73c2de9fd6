"""Value objects passed into and returned from a generator run."""

from dataclasses import dataclass, field
from enum import Enum


class EntityKind(Enum):
    """Which generator flow is active."""

    REPOSITORY = ("Repositories", "Repository file")
    SERVICE = ("Services", "Service file")

    @property
    def default_package(self) -> str:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class GenerationRequest:
    """Everything the user asked for in one invocation."""

    raw_name: str
    entity_kind: EntityKind
    bound_model_name: str | None = None
    with_interface: bool = False
    force: bool = False
    with_test: bool = False


@dataclass(frozen=True)
class ArtifactResult:
    """Outcome of a collaborator that may or may not create a file."""

    created: bool
    path: str


@dataclass(frozen=True)
class GenerationResult:
    """Files produced by a successful run."""

    entity_kind: EntityKind
    written_paths: tuple[str, ...] = field(default_factory=tuple)
    produced_interface: bool = False
    produced_test: bool = False

    @property
    def summary(self) -> str:
        info = self.entity_kind.label
        if self.produced_interface:
            info += " and interface"
        if self.produced_test:
            info += " and test"
        return f"{info} [{', '.join(self.written_paths)}] created successfully."
