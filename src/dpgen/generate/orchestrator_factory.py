"""Wires a GeneratorOrchestrator and its collaborators from a GeneratorConfig."""

from dpgen.generate.file_writer import FileWriter
from dpgen.generate.generation_request import EntityKind
from dpgen.generate.generator_config import GeneratorConfig
from dpgen.generate.matching_test_generator import MatchingTestGenerator
from dpgen.generate.model_generator import ModelGenerator
from dpgen.generate.name_resolver import NameResolver
from dpgen.generate.orchestrator import GeneratorOrchestrator
from dpgen.generate.reporter import ClickReporter
from dpgen.generate.template_store import TemplateStore


def make_orchestrator(entity_kind: EntityKind, config: GeneratorConfig) -> GeneratorOrchestrator:
    file_writer = FileWriter()
    return GeneratorOrchestrator(
        entity_kind=entity_kind,
        name_resolver=NameResolver(
            entity_kind, config.base_path,
            root_package=config.root_package,
        ),
        template_store=TemplateStore(config.stubs_dir),
        file_writer=file_writer,
        reporter=ClickReporter(),
        model_generator=ModelGenerator(
            config.base_path, config.root_package, config.models_package, file_writer,
        ),
        test_generator=MatchingTestGenerator(
            config.base_path, config.root_package, config.tests_dir, file_writer,
        ),
        root_package=config.root_package,
        models_package=config.models_package,
    )
