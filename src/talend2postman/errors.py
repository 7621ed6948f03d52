"""Error types raised by the command-line driver.

All of them are click exceptions with exit code 1, so click prints
``Error: <message>`` to stderr and terminates the process.
"""

import click


class ConverterError(click.ClickException):
    """Base class for fatal conversion errors."""

    exit_code = 1


class UsageError(ConverterError):
    """Wrong number of command-line arguments."""

    def __init__(self, message: str, ctx: click.Context | None = None):
        super().__init__(message)
        self.ctx = ctx

    def show(self, file=None) -> None:
        if self.ctx is not None:
            click.echo(self.ctx.get_usage(), err=True)
        super().show(file)


class InputNotFoundError(ConverterError):
    """The input path does not exist."""


class ParseError(ConverterError):
    """The input could not be read, decoded or parsed as a Talend export."""


class WriteError(ConverterError):
    """The output file could not be written."""


class ConfigError(ConverterError):
    """A TALEND2POSTMAN_* setting has an invalid value."""
