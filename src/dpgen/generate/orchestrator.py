"""GeneratorOrchestrator: runs one repository or service generation end to end."""

from dpgen.generate.errors import AlreadyExistsError, GenerationError
from dpgen.generate.file_writer import FileWriter
from dpgen.generate.generation_request import EntityKind, GenerationRequest, GenerationResult
from dpgen.generate.name_resolver import NameResolver, ResolvedTarget, interface_path_for
from dpgen.generate.placeholders import parse_model, substitute
from dpgen.generate.template_selector import select_interface_template, select_template
from dpgen.generate.template_store import TemplateStore


class GeneratorOrchestrator:
    """Validates a request, renders its stubs and writes the files.

    Args:
        entity_kind: Repository or service flow.
        name_resolver: NameResolver for this entity kind.
        template_store: Provides stub text by TemplateVariant.
        file_writer: FileWriter used for the main and interface files.
        reporter: Object with info(msg) and error(msg).
        model_generator: Optional collaborator with generate(model_name),
            called when a model is bound.
        test_generator: Optional collaborator with generate(target, kind),
            called when the request asks for a matching test.
        root_package: Package bound model names are qualified under.
        models_package: Sub-package of the root package holding models.
    """

    def __init__(self, entity_kind: EntityKind, name_resolver: NameResolver,
                 template_store: TemplateStore, file_writer: FileWriter, reporter,
                 *, model_generator=None, test_generator=None,
                 root_package: str = "app", models_package: str = "Models"):
        self._entity_kind = entity_kind
        self._name_resolver = name_resolver
        self._template_store = template_store
        self._file_writer = file_writer
        self._reporter = reporter
        self._model_generator = model_generator
        self._test_generator = test_generator
        self._root_package = root_package
        self._models_package = models_package

    def generate(self, request: GenerationRequest) -> GenerationResult | None:
        """Run the generation; return None after reporting a validation failure.

        I/O errors and collaborator errors propagate unchanged.
        """
        try:
            target, model_class = self._validate(request)
        except GenerationError as exc:
            self._reporter.error(str(exc))
            return None

        if request.bound_model_name and self._model_generator is not None:
            self._model_generator.generate(request.bound_model_name)

        written = [self._write_main_file(request, target, model_class)]

        if request.with_interface:
            written.append(self._write_interface_file(request, target))

        produced_test = False
        if request.with_test and self._test_generator is not None:
            test_result = self._test_generator.generate(target, self._entity_kind)
            if test_result.created:
                produced_test = True
                written.append(test_result.path)

        result = GenerationResult(
            entity_kind=self._entity_kind,
            written_paths=tuple(written),
            produced_interface=request.with_interface,
            produced_test=produced_test,
        )
        self._reporter.info(result.summary)
        return result

    def _validate(self, request):
        target = self._name_resolver.resolve(request.raw_name)

        model_class = None
        if request.bound_model_name:
            model_class = parse_model(request.bound_model_name, self._root_package, self._models_package)

        if not request.force:
            self._ensure_absent(target.file_path)
            if request.with_interface:
                self._ensure_absent(interface_path_for(target))

        return target, model_class

    def _ensure_absent(self, path):
        if self._file_writer.exists(path):
            raise AlreadyExistsError(path, self._entity_kind.label)

    def _write_main_file(self, request, target: ResolvedTarget, model_class) -> str:
        variant = select_template(self._entity_kind, request.with_interface, model_class is not None)
        stub = self._template_store.get_template_text(variant)
        self._file_writer.write(target.file_path, substitute(stub, target, model_class), force=request.force)
        return target.file_path

    def _write_interface_file(self, request, target: ResolvedTarget) -> str:
        path = interface_path_for(target)
        stub = self._template_store.get_template_text(select_interface_template())
        self._file_writer.write(path, substitute(stub, target), force=request.force)
        return path
