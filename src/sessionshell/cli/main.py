"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from sessionshell import __version__
from sessionshell.exceptions import SessionShellError, format_error_for_display
from sessionshell.models import AppConfig
from sessionshell.models.config import default_app_support_dir, default_config_path

from .commands import config, status

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path], log_dir: Optional[Path] = None) -> Path:
    """Where log records go for the given flags and configured log directory."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "sessionshell-debug.log"
    return (log_dir or default_app_support_dir() / "logs") / "sessionshell.log"


def setup_logging(
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
    log_dir: Optional[Path] = None,
) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level used together with --log-file
        log_dir: Directory for the default log file (AppConfig.log_dir)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file, log_dir)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


def report_error(error: Exception, log_path: Optional[Path]) -> None:
    """Print a SessionShellError (or any exception) without a traceback."""
    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="sessionshell")
@click.option(
    '--config-file', '-c',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Configuration file (default: sessionshell.json in the app support directory)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./sessionshell-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
@click.option(
    '--skip-migration',
    is_flag=True,
    help='Never offer the legacy data migration'
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
    skip_migration: bool
):
    """
    Session shell - coordination core of a two-tab conference session browser.

    \b
    Examples:
      # Show store locations and whether a legacy store is waiting
      sessionshell status

    \b
      # Show the effective configuration
      sessionshell config show

    \b
      # Enable debug logging
      sessionshell --debug status
    """
    config_path = config_file or default_config_path()

    # Config is read first so its app_support_dir decides where logs go
    try:
        app_config = AppConfig.load_or_default(config_path)
    except SessionShellError as e:
        log_path = setup_logging(verbose, debug, log_file, log_level)
        logger.error(f"Failed to load configuration from {config_path}")
        e.log(logger)
        report_error(e, log_path)
        sys.exit(1)

    log_path = setup_logging(verbose, debug, log_file, log_level, app_config.log_dir)

    ctx.obj = {
        "config": app_config,
        "config_path": config_path,
        "log_path": log_path,
        "skip_migration": skip_migration,
    }


cli.add_command(config)
cli.add_command(status)

if __name__ == "__main__":
    cli()
