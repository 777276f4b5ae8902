"""The key event model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

KEY_EVENT: Literal["key"] = "key"

EventName = Literal["key"]


class KeyEvent(BaseModel):
    """A single decoded key press.

    Attribute names are snake_case; the camelCase aliases keep the shape of
    DOM keyboard events (``model_dump(by_alias=True)``).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    key: str = Field(min_length=1)
    key_code: int | None = Field(default=None, alias="keyCode")
    ctrl_key: bool = Field(default=False, alias="ctrlKey")
    alt_key: bool = Field(default=False, alias="altKey")
    shift_key: bool = Field(default=False, alias="shiftKey")
    timestamp: int
