"""Print shell completion scripts for the dpgen CLI."""

import click
from click.shell_completion import get_completion_class

SUPPORTED_SHELLS = ("bash", "zsh", "fish")


@click.command("completion")
@click.argument("shell", type=click.Choice(SUPPORTED_SHELLS), required=False)
@click.pass_context
def completion(ctx, shell):
    """Print the completion script for SHELL."""
    root = ctx.find_root()
    if shell is None:
        click.echo(f"Supported shells: {', '.join(SUPPORTED_SHELLS)}")
        click.echo(f'Enable with: eval "$({root.info_name} completion zsh)"')
        return
    complete_var = f"_{root.info_name.upper().replace('-', '_')}_COMPLETE"
    comp = get_completion_class(shell)(
        cli=root.command, ctx_args={}, prog_name=root.info_name, complete_var=complete_var,
    )
    click.echo(comp.source())
