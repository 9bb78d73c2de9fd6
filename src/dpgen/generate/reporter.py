"""ClickReporter: the console channel used to report generator outcomes."""

import click


class ClickReporter:
    def info(self, message: str) -> None:
        click.echo(message)

    def error(self, message: str) -> None:
        click.echo(message, err=True)
