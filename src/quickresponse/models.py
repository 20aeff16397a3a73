"""Quick response value types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, field_validator

from quickresponse.constants import CANNED_RESPONSE_KEYS, NUM_CANNED_RESPONSES

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class QuickResponseSet(BaseModel):
    """The four quick responses offered as one-tap SMS replies, in slot order."""

    model_config = ConfigDict(frozen=True)

    responses: tuple[str, str, str, str]

    @field_validator("responses", mode="before")
    @classmethod
    def coerce_sequence(cls, value: object) -> object:
        """Accept any list-like of responses; length is enforced by the tuple type."""
        if isinstance(value, list):
            return tuple(value)
        return value

    def slot(self, index: int) -> str:
        """Get the response stored in 1-based ``index``."""
        if not 1 <= index <= NUM_CANNED_RESPONSES:
            raise IndexError(f"Quick response slot must be 1..{NUM_CANNED_RESPONSES}, got {index}")
        return self.responses[index - 1]

    def as_preferences(self) -> dict[str, str]:
        """Map each slot's preference key to its response."""
        return dict(zip(CANNED_RESPONSE_KEYS, self.responses, strict=True))

    @classmethod
    def from_preferences(
        cls, prefs: Mapping[str, str], *, defaults: Sequence[str] | None = None
    ) -> QuickResponseSet:
        """Build a set from preference keys.

        Args:
            prefs: Stored preferences, possibly holding unrelated keys.
            defaults: Per-slot fallbacks for keys missing from ``prefs``.

        Raises:
            KeyError: if a slot key is missing and no defaults were given.
        """
        if defaults is None:
            return cls(responses=tuple(prefs[key] for key in CANNED_RESPONSE_KEYS))
        return cls(
            responses=tuple(
                prefs.get(key, default)
                for key, default in zip(CANNED_RESPONSE_KEYS, defaults, strict=True)
            )
        )
