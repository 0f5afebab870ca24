"""Session selection model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SessionSelection(BaseModel):
    """A selected session in one tab: its identifier plus the view model built for it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    session_identifier: str = Field(min_length=1, description="Identifier of the selected session")
    view_model: Any | None = Field(
        default=None,
        description="View model the list controller derived for the session (opaque to the core)",
    )

    def __str__(self) -> str:
        return self.session_identifier
