"""CLI commands for sessionshell."""

from .config import config
from .status import status

__all__ = ["config", "status"]
