"""CLI module for media_inspect."""

import logging
from pathlib import Path

import click

from media_inspect.cli.exit_codes import ExitCode
from media_inspect.cli.output import error_exit
from media_inspect.config import TomlParseError, get_config
from media_inspect.logging import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="media-inspect")
@click.option(
    "--mediainfo-bin",
    default=None,
    help="Path to the mediainfo binary if it is not in the system PATH.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to config file (default: ~/.media-inspect/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Write logs to this file (rotated at 10 MB).",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Emit one JSON object per log record.",
)
@click.pass_context
def main(
    ctx: click.Context,
    mediainfo_bin: str | None,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """media-inspect - Extract track metadata from media files with mediainfo."""
    ctx.ensure_object(dict)

    # Preserve a config injected by tests
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = get_config(
                config_path=config_path,
                mediainfo_path=mediainfo_bin,
                strict=config_path is not None,
            )
        except (TomlParseError, ValueError) as e:
            error_exit(f"Invalid configuration: {e}", ExitCode.CONFIG_ERROR)

    config = ctx.obj["config"]
    try:
        logging_config = config.logging.with_overrides(
            level=log_level,
            file=log_file,
            format="json" if log_json else None,
        )
    except ValueError as e:
        error_exit(f"Invalid logging configuration: {e}", ExitCode.CONFIG_ERROR)
    configure_logging(logging_config)
    logger.debug("Using mediainfo binary: %s", config.inspector.mediainfo_path)


def _register_commands() -> None:
    from media_inspect.cli.check import check_command
    from media_inspect.cli.inspect import inspect_command

    main.add_command(inspect_command)
    main.add_command(check_command)


_register_commands()
