"""Process environment directives."""

import logging
import os
import sys
from collections.abc import Mapping, Sequence
from typing import Optional

logger = logging.getLogger(__name__)

SKIP_MIGRATION_FLAG = "--skip-migration"
SKIP_MIGRATION_ENV = "SESSIONSHELL_SKIP_MIGRATION"

_TRUTHY = {"1", "true", "yes", "on"}


class ProcessEnvironment:
    """
    Reads execution directives from the command line and environment.

    The skip-migration directive is set by any of:
    - `--skip-migration` among the process arguments
    - SESSIONSHELL_SKIP_MIGRATION set to 1/true/yes/on
    - the `skip_migration` config value (passed as `config_skip_migration`)
    """

    def __init__(
        self,
        argv: Optional[Sequence[str]] = None,
        environ: Optional[Mapping[str, str]] = None,
        config_skip_migration: bool = False,
    ):
        self._argv = list(sys.argv if argv is None else argv)
        self._environ = os.environ if environ is None else environ
        self._config_skip_migration = config_skip_migration

    @property
    def skip_migration(self) -> bool:
        if SKIP_MIGRATION_FLAG in self._argv:
            return True
        if self._environ.get(SKIP_MIGRATION_ENV, "").strip().lower() in _TRUTHY:
            return True
        return self._config_skip_migration


def exit_process() -> None:
    """Terminate the application (the user chose to quit)."""
    logger.info("Exiting")
    sys.exit(0)
