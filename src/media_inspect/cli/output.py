"""Shared stdout/stderr helpers for CLI commands."""

from __future__ import annotations

import json
import sys
from typing import Any, NoReturn

import click

from media_inspect.cli.exit_codes import ExitCode


def echo_json(data: Any) -> None:
    """Print ``data`` to stdout as indented JSON."""
    click.echo(json.dumps(data, indent=2, default=str))


def error_exit(message: str, code: ExitCode, json_output: bool = False) -> NoReturn:
    """Report an error on stderr and exit with ``code``.

    With ``json_output`` the error is a JSON object so callers parsing the
    command's output always receive JSON::

        {"status": "failed", "error": {"code": "INVALID_MEDIA", "message": "..."}}
    """
    if json_output:
        payload = {"status": "failed", "error": {"code": code.name, "message": message}}
        click.echo(json.dumps(payload), err=True)
    else:
        click.echo(f"Error: {message}", err=True)
    sys.exit(int(code))
