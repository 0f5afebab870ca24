"""Status command - where the stores live and whether migration is pending."""

import click

from sessionshell.environment import ProcessEnvironment
from sessionshell.models import AppConfig


def _describe(exists: bool) -> str:
    return "present" if exists else "missing"


@click.command()
@click.pass_obj
def status(obj: dict):
    """Show content store and legacy store locations."""
    app_config: AppConfig = obj["config"]
    environment = ProcessEnvironment(
        config_skip_migration=app_config.skip_migration or obj.get("skip_migration", False)
    )

    core = app_config.core_store_path
    legacy = app_config.legacy_store_path

    click.echo(f"Content store:  {core} ({_describe(core.exists())})")
    click.echo(f"Legacy store:   {legacy} ({_describe(legacy.exists())})")
    click.echo(f"Schema version: {app_config.schema_version}")

    if environment.skip_migration:
        click.echo("Migration:      skipped (skip directive set)")
    elif legacy.exists():
        click.echo("Migration:      legacy data found, will be offered after the next sync")
    else:
        click.echo("Migration:      nothing to migrate")
