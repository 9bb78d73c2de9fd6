"""Top-level Click group for the dpgen CLI."""

import os
import sys

import click

from dpgen.completion import completion
from dpgen.generate.cli import generate_repository, generate_service
from dpgen.generate.generator_config import find_project_root, load_generator_config


@click.group()
@click.option(
    "--base-path",
    type=click.Path(file_okay=False),
    envvar="DPGEN_BASE_PATH",
    default=None,
    help="Project root to generate into (default: enclosing Git work tree or cwd)",
)
@click.option("--root-package", default=None, help="Root package of the application (default: app)")
@click.pass_context
def main(ctx, base_path, root_package):
    """dpgen - scaffold repository and service classes."""
    base_path = base_path or find_project_root(os.getcwd())
    try:
        config = load_generator_config(base_path)
    except ValueError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)
    ctx.obj = config.with_overrides(root_package=root_package)


main.add_command(generate_repository)
main.add_command(generate_service)
main.add_command(completion)
