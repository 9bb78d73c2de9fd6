"""ModelGenerator: creates the data-model module a repository is bound to."""

import os

from dpgen.generate.errors import AlreadyExistsError
from dpgen.generate.file_writer import FileWriter
from dpgen.generate.generation_request import ArtifactResult
from dpgen.generate.placeholders import parse_model
from dpgen.templates.template_renderer import render_template


class ModelGenerator:
    """Writes ``<base>/<root>/Models/<Name>.py`` unless it already exists."""

    def __init__(self, base_path: str, root_package: str = "app",
                 models_package: str = "Models", file_writer: FileWriter | None = None):
        self._base_path = base_path
        self._root_package = root_package
        self._models_package = models_package
        self._file_writer = file_writer or FileWriter()

    def model_path(self, model_class: str) -> str:
        return os.path.join(self._base_path, *model_class.split(".")) + ".py"

    def generate(self, model_name: str) -> ArtifactResult:
        model_class = parse_model(model_name, self._root_package, self._models_package)
        path = self.model_path(model_class)
        content = render_template(
            "model.py.j2",
            package=__package__,
            model=model_class.rsplit(".", 1)[-1],
            module=model_class,
        )
        try:
            self._file_writer.write(path, content)
        except AlreadyExistsError:
            return ArtifactResult(created=False, path=path)
        return ArtifactResult(created=True, path=path)
