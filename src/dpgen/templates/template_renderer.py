"""Render Jinja2 templates bundled in a caller's ``templates`` subpackage."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str, **context) -> str:
    """Render a bundled Jinja2 template.

    Args:
        template_name: Template filename (e.g. "model.py.j2")
        package: The caller's package (pass __package__). Templates are read
            from a ``templates`` subpackage beneath it.
        **context: Template variables. Undefined variables are an error.

    Returns:
        The rendered text, keeping the template's trailing newline.

    Raises:
        FileNotFoundError: If the template does not exist
        jinja2.UndefinedError: If the template uses a variable not in *context*
    """
    resource = importlib.resources.files(f"{package}.templates").joinpath(template_name)
    if not resource.is_file():
        raise FileNotFoundError(f"Template not found: {template_name}")
    source = resource.read_text(encoding="utf-8")
    template = jinja2.Template(
        source, undefined=jinja2.StrictUndefined, keep_trailing_newline=True,
    )
    return template.render(**context)
