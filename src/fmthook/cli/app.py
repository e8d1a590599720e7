# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI entry point invoked by the host for every file-write event."""

from __future__ import annotations

import logging
import sys
from typing import Annotated

import typer

from .. import __version__
from ..config import HookSettings
from ..constants import PROGRAM_NAME, TIMEOUT_ENV_VAR
from ..logging import configure_logging
from ..models import ExecutionOutcome, OutcomeKind
from ..pipeline import run_hook
from ..response import build_response

LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    name=PROGRAM_NAME,
    help="Format the file named by a host event with the best available formatter.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Attach a summary of the outcome to the response."),
]
PROJECT_ONLY_OPTION = Annotated[
    bool,
    typer.Option("--project-only", help="Only use formatters installed inside the project."),
]
TIMEOUT_OPTION = Annotated[
    str | None,
    typer.Option(
        "--timeout",
        metavar="SECONDS",
        envvar=TIMEOUT_ENV_VAR,
        help="Seconds a formatter may run before it is killed.",
    ),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", help="Log resolver and executor decisions to stderr."),
]
VERSION_OPTION = Annotated[
    bool,
    typer.Option(
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
]


# Hosts may pass flags this version does not know; they are ignored.
@app.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
def main(
    ctx: typer.Context,
    debug: DEBUG_OPTION = False,
    project_only: PROJECT_ONLY_OPTION = False,
    timeout: TIMEOUT_OPTION = None,
    verbose: VERBOSE_OPTION = False,
    version: VERSION_OPTION = False,
) -> None:
    """Read the host event from stdin and print the JSON response.

    The exit status is always 0 so formatting never blocks the host.
    """

    configure_logging(verbose=verbose)
    if ctx.args:
        LOGGER.debug("ignored_args=%s", " ".join(ctx.args))
    settings = HookSettings.from_cli(debug=debug, verbose=verbose, project_only=project_only, timeout=timeout)
    try:
        raw_event = sys.stdin.read()
    except (OSError, UnicodeDecodeError):
        outcome = ExecutionOutcome(kind=OutcomeKind.INTERNAL_ERROR, stage="input", detail="Failed to read input")
        typer.echo(build_response(outcome, debug=settings.debug).to_json())
        raise typer.Exit(code=0) from None

    typer.echo(run_hook(raw_event, settings).to_json())
    raise typer.Exit(code=0)


def run() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main", "run"]
