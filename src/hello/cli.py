"""Typer CLI entrypoint for the hello program."""

from __future__ import annotations

import logging

import typer

from .hello import main as hello_main
from .logging_config import configure_logging

LOGGER = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


@app.command(
    add_help_option=False,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def main(ctx: typer.Context) -> None:
    """Configure logging and emit the greeting. Every argument is ignored."""

    configure_logging()
    if ctx.args:
        LOGGER.debug("cli_args_ignored args=%s", ctx.args)
    hello_main(ctx.args)


def run() -> None:
    """Console-script entry point."""
    app()
