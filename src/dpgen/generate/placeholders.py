"""Placeholder substitution for stubs.

Stubs contain literal ``{{ token }}`` markers. Substitution is plain string
replacement of every occurrence; there are no conditionals or loops.
"""

import keyword
import re

from dpgen.generate.errors import InvalidModelNameError
from dpgen.generate.name_resolver import ResolvedTarget

NAMESPACE_TOKEN = "{{ namespace }}"
CLASS_TOKEN = "{{ class }}"
NAMESPACED_MODEL_TOKEN = "{{ namespacedModel }}"
MODEL_TOKEN = "{{ model }}"
MODEL_VARIABLE_TOKEN = "{{ modelVariable }}"

_INVALID_MODEL_CHARS = re.compile(r"[^A-Za-z0-9_/\\]")
_TOKEN_PATTERN = re.compile(r"\{\{\s*\w+\s*\}\}")


def validate_model_name(model_name: str) -> None:
    """Raise InvalidModelNameError unless *model_name* can be imported as a model class.

    Only ``[A-Za-z0-9_/\\]`` is allowed; every segment must be a non-keyword
    identifier and the class segment must start with an uppercase letter.
    """
    if not model_name or _INVALID_MODEL_CHARS.search(model_name):
        raise InvalidModelNameError("Model name contains invalid characters.")
    segments = model_name.replace("\\", "/").strip("/").split("/")
    if any(keyword.iskeyword(s) or not s.isidentifier() for s in segments):
        raise InvalidModelNameError(f'The model name "{model_name}" is not a valid Python class name.')
    if not segments[-1][0].isupper():
        raise InvalidModelNameError(f'The model name "{model_name}" must start with an uppercase letter.')


def qualify_model(model_name: str, root_package: str = "app", models_package: str = "Models") -> str:
    """Return the dotted module path of a model.

    ``User`` becomes ``app.Models.User``; ``app/Models/User`` is kept as-is.
    """
    model = model_name.replace("\\", "/").strip("/").replace("/", ".")
    if model.startswith(f"{root_package}."):
        return model
    return f"{root_package}.{models_package}.{model}"


def parse_model(model_name: str, root_package: str = "app", models_package: str = "Models") -> str:
    """Validate and qualify a bound model name."""
    validate_model_name(model_name)
    return qualify_model(model_name, root_package, models_package)


def lcfirst(value: str) -> str:
    return value[:1].lower() + value[1:]


def build_placeholders(target: ResolvedTarget, model_class: str | None = None) -> dict[str, str]:
    """Build the token -> replacement mapping for one request."""
    placeholders = {
        NAMESPACE_TOKEN: target.namespace,
        CLASS_TOKEN: target.class_name,
    }
    if model_class:
        model = model_class.rsplit(".", 1)[-1]
        placeholders[NAMESPACED_MODEL_TOKEN] = model_class
        placeholders[MODEL_TOKEN] = model
        placeholders[MODEL_VARIABLE_TOKEN] = lcfirst(model)
    return placeholders


def substitute(template_text: str, target: ResolvedTarget, model_class: str | None = None) -> str:
    """Replace every known token in *template_text*."""
    text = template_text
    for token, value in build_placeholders(target, model_class).items():
        text = text.replace(token, value)
    return text


def find_unresolved_tokens(text: str) -> list[str]:
    """Return any ``{{ token }}`` markers still present in *text*."""
    return _TOKEN_PATTERN.findall(text)
