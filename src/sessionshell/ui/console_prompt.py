"""Terminal implementation of the migration prompt."""

import click

from sessionshell.models import MigrationChoice

MIGRATION_TITLE = "Migrate your data"
MIGRATION_MESSAGE = (
    "Data from a previous version was found on this computer. Do you want to migrate "
    "your preferences, favorites and other user data to the new version?\n\n"
    "NOTICE: if you import your data, old versions of the app will no longer work on "
    "this computer."
)

_CHOICES = {
    "1": (MigrationChoice.MIGRATE, "Migrate Data"),
    "2": (MigrationChoice.START_FRESH, "Start Fresh"),
    "3": (MigrationChoice.QUIT, "Quit"),
}


class ConsoleMigrationPrompt:
    """Asks the migration question on the terminal and shows notices on stderr."""

    def ask_migration_choice(self) -> MigrationChoice:
        click.secho(MIGRATION_TITLE, bold=True)
        click.echo(MIGRATION_MESSAGE)
        click.echo()
        for key, (_, label) in _CHOICES.items():
            click.echo(f"  [{key}] {label}")

        answer = click.prompt(
            "Choice",
            type=click.Choice(list(_CHOICES)),
            default="1",
            show_choices=False,
        )
        return _CHOICES[answer][0]

    def show_error(self, message: str) -> None:
        click.secho(f"ERROR: {message}", fg="red", err=True)
