"""Click commands for generating repository and service classes."""

import sys

import click

from dpgen.generate.generation_request import EntityKind, GenerationRequest
from dpgen.generate.orchestrator_factory import make_orchestrator


def _run(config, request):
    orchestrator = make_orchestrator(request.entity_kind, config)
    result = orchestrator.generate(request)
    if result is None:
        sys.exit(1)


@click.command("generate-repository")
@click.argument("name")
@click.option("--model", "-m", default=None, help="Bind the repository to this model (created if missing)")
@click.option("--interface", "-i", is_flag=True, help="Also create a repository interface")
@click.option("--test", "with_test", is_flag=True, help="Also create a matching test")
@click.option("--force", is_flag=True, help="Overwrite existing files")
@click.pass_obj
def generate_repository(config, name, model, interface, with_test, force):
    """Create a new repository class."""
    _run(config, GenerationRequest(
        raw_name=name,
        entity_kind=EntityKind.REPOSITORY,
        bound_model_name=model,
        with_interface=interface,
        force=force,
        with_test=with_test or config.matching_tests,
    ))


@click.command("generate-service")
@click.argument("name")
@click.option("--interface", "-i", is_flag=True, help="Also create a service interface")
@click.option("--test", "with_test", is_flag=True, help="Also create a matching test")
@click.option("--force", is_flag=True, help="Overwrite existing files")
@click.pass_obj
def generate_service(config, name, interface, with_test, force):
    """Create a new service class."""
    _run(config, GenerationRequest(
        raw_name=name,
        entity_kind=EntityKind.SERVICE,
        with_interface=interface,
        force=force,
        with_test=with_test or config.matching_tests,
    ))
