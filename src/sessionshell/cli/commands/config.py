"""Config command group - inspect the shell configuration."""

from pathlib import Path

import click

from sessionshell.models import AppConfig


@click.group(name="config")
def config():
    """Inspect sessionshell settings."""


@config.command(name="show")
@click.option('--field', '-f', type=str, default=None, help='Show a single field')
@click.pass_obj
def show(obj: dict, field: str | None):
    """Display the effective configuration as JSON."""
    app_config: AppConfig = obj["config"]

    if field is None:
        click.echo(app_config.model_dump_json(indent=2))
        return

    if field not in AppConfig.model_fields:
        valid = ", ".join(AppConfig.model_fields)
        raise click.BadParameter(f"Unknown field '{field}'. Valid fields: {valid}", param_hint="--field")

    click.echo(app_config.model_dump(mode="json")[field])


@config.command(name="path")
@click.pass_obj
def path(obj: dict):
    """Print the configuration file location."""
    config_path: Path = obj["config_path"]
    click.echo(str(config_path))
