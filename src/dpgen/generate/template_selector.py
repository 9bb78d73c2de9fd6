"""Pick the stub variant for an entity kind and flag combination."""

from enum import Enum

from dpgen.generate.generation_request import EntityKind


class TemplateVariant(Enum):
    """A stub; the value is its path relative to the stubs directory."""

    REPOSITORY = "repository/repository.stub"
    REPOSITORY_MODEL = "repository/repository-model.stub"
    REPOSITORY_INTERFACE = "repository/repository-interface.stub"
    REPOSITORY_MODEL_INTERFACE = "repository/repository-model-interface.stub"
    SERVICE = "service/service.stub"
    SERVICE_INTERFACE = "service/service-interface.stub"
    INTERFACE_DECLARATION = "interface.stub"


# (entity_kind, with_interface, has_model) -> variant
_VARIANTS = {
    (EntityKind.REPOSITORY, False, False): TemplateVariant.REPOSITORY,
    (EntityKind.REPOSITORY, False, True): TemplateVariant.REPOSITORY_MODEL,
    (EntityKind.REPOSITORY, True, False): TemplateVariant.REPOSITORY_INTERFACE,
    (EntityKind.REPOSITORY, True, True): TemplateVariant.REPOSITORY_MODEL_INTERFACE,
    (EntityKind.SERVICE, False, False): TemplateVariant.SERVICE,
    (EntityKind.SERVICE, False, True): TemplateVariant.SERVICE,
    (EntityKind.SERVICE, True, False): TemplateVariant.SERVICE_INTERFACE,
    (EntityKind.SERVICE, True, True): TemplateVariant.SERVICE_INTERFACE,
}


def select_template(entity_kind: EntityKind, with_interface: bool, has_model: bool) -> TemplateVariant:
    """Return the main-file stub for the given flags."""
    return _VARIANTS[(entity_kind, bool(with_interface), bool(has_model))]


def select_interface_template() -> TemplateVariant:
    """Return the stub for the interface file itself, shared by all kinds."""
    return TemplateVariant.INTERFACE_DECLARATION
