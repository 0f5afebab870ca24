"""Main entry point for sessionshell."""

from sessionshell.cli.main import cli

if __name__ == "__main__":
    cli()
