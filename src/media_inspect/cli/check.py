"""CLI check command: report mediainfo availability."""

import sys

import click

from media_inspect.cli.exit_codes import ExitCode
from media_inspect.cli.output import echo_json
from media_inspect.config.models import AppConfig
from media_inspect.tools import detect_mediainfo, is_tool_installed


@click.command("check")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON.")
@click.pass_obj
def check_command(obj: dict, json_output: bool) -> None:
    """Check that mediainfo is installed and show its version."""
    config: AppConfig = obj["config"]
    binary = config.inspector.mediainfo_path

    installed = is_tool_installed(binary, config.inspector.timeout_seconds)
    info = detect_mediainfo(binary)

    if json_output:
        echo_json(
            {
                "binary": binary,
                "installed": installed,
                "status": info.status.value,
                "path": info.path,
                "version": info.version,
                "message": info.status_message,
            }
        )
    else:
        click.echo(f"mediainfo binary: {binary}")
        if not installed:
            click.echo("Status: not installed")
        else:
            click.echo(f"Status: {info.status.value}")
            if info.path:
                click.echo(f"Path: {info.path}")
            if info.is_available():
                click.echo(f"Version: {info.version or 'unknown'}")
            if info.status_message:
                click.echo(f"Note: {info.status_message}")

    sys.exit(ExitCode.SUCCESS if installed else ExitCode.TOOL_NOT_AVAILABLE)
