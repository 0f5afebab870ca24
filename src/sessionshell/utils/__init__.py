"""Generic utilities for sessionshell.

- persistence: JSON load/save for Pydantic models
"""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
