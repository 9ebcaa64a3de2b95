"""CLI inspect command for media_inspect."""

import logging
import sys
from pathlib import Path

import click

from media_inspect.cli.exit_codes import ExitCode
from media_inspect.cli.output import error_exit
from media_inspect.config.models import AppConfig
from media_inspect.introspector import (
    InvalidMediaError,
    InvocationFailedError,
    MalformedOutputError,
    MediaInfoIntrospector,
    ToolNotInstalledError,
    format_human,
    format_json,
)

logger = logging.getLogger(__name__)


@click.command("inspect")
@click.argument("file", type=click.Path(exists=False, path_type=Path))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    help="Output format (default: human)",
)
@click.option(
    "--allow-invalid",
    is_flag=True,
    help="Print tracks and exit 0 even if the file lacks audio or video.",
)
@click.pass_obj
def inspect_command(
    obj: dict,
    file: Path,
    output_format: str,
    allow_invalid: bool,
) -> None:
    """Inspect a media file and display its General, Video and Audio tracks.

    FILE is the path to the media file to inspect.
    """
    config: AppConfig = obj["config"]
    json_output = output_format == "json"

    if not file.exists():
        error_exit(f"File not found: {file}", ExitCode.TARGET_NOT_FOUND, json_output)

    introspector = MediaInfoIntrospector(config.inspector)
    try:
        info = introspector.get_media_info(file)
    except ToolNotInstalledError as e:
        error_exit(str(e), ExitCode.TOOL_NOT_AVAILABLE, json_output)
    except InvocationFailedError as e:
        error_exit(str(e), ExitCode.INVOCATION_FAILED, json_output)
    except MalformedOutputError as e:
        error_exit(str(e), ExitCode.PARSE_ERROR, json_output)
    except InvalidMediaError as e:
        if not allow_invalid:
            error_exit(str(e), ExitCode.INVALID_MEDIA, json_output)
        logger.info("Showing tracks of invalid media: %s", file)
        info = e.media_info

    if json_output:
        click.echo(format_json(info, file))
    else:
        click.echo(format_human(info, file))
    sys.exit(ExitCode.SUCCESS)
