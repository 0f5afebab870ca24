"""Player ownership and playback context snapshots.

Ownership is a tagged variant rather than two independently nullable
fields, so the owner tab and the owner session are always set and cleared
together.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import Tab


class IdleOwnership(BaseModel):
    """Nobody owns the player surface."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class OwnedPlayback(BaseModel):
    """The player surface is owned by a session selected in a tab."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["owned"] = "owned"
    tab: Tab
    session_identifier: str = Field(min_length=1)


PlayerOwnership = Annotated[Union[IdleOwnership, OwnedPlayback], Field(discriminator="kind")]

IDLE = IdleOwnership()


class RestoreDirective(BaseModel):
    """Tells the shell to bring back the tab and session that owned the player."""

    model_config = ConfigDict(frozen=True)

    tab: Tab
    session_identifier: str


class PlaybackContext(BaseModel):
    """Read-only snapshot of the shared player's ownership state."""

    model_config = ConfigDict(frozen=True)

    owner: PlayerOwnership = IDLE
    can_restore: bool = False
    is_transitioning: bool = False
    is_detached: bool = False

    @property
    def owner_tab(self) -> Optional[Tab]:
        return self.owner.tab if isinstance(self.owner, OwnedPlayback) else None

    @property
    def owner_session_identifier(self) -> Optional[str]:
        return self.owner.session_identifier if isinstance(self.owner, OwnedPlayback) else None
