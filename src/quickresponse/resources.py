"""Compiled-in default strings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from quickresponse.constants import RESOURCE_CANNED_RESPONSE_IDS

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_STRINGS: dict[str, str] = {
    "respond_via_sms_canned_response_1": "Can't talk now. What's up?",
    "respond_via_sms_canned_response_2": "I'll call you right back.",
    "respond_via_sms_canned_response_3": "I'll call you later.",
    "respond_via_sms_canned_response_4": "Can't talk now. Call me later?",
}


class ResourceProvider(Protocol):
    """Source of static strings looked up by stable identifier."""

    def get_string(self, resource_id: str) -> str: ...


class StaticResources:
    """Resource provider backed by an in-process string table."""

    def __init__(self, strings: Mapping[str, str] | None = None) -> None:
        self._strings = dict(DEFAULT_STRINGS)
        if strings:
            self._strings.update(strings)

    def get_string(self, resource_id: str) -> str:
        # Unknown ids are a programming error, not a runtime condition.
        return self._strings[resource_id]


def canned_response_defaults(resources: ResourceProvider) -> list[str]:
    """Get the four default quick responses in slot order."""
    return [resources.get_string(resource_id) for resource_id in RESOURCE_CANNED_RESPONSE_IDS]
