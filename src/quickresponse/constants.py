"""Constants for quick response storage."""

from __future__ import annotations

from typing import Final

# Preference namespace shared by the telecom and telephony components.
SHARED_PREFERENCES_NAME: Final = "respond_via_sms_prefs"

CURRENT_COMPONENT: Final = "telecom"
LEGACY_COMPONENT: Final = "telephony"

# The number of responses is fixed; the store has no array type, so each one
# lives under its own key.
NUM_CANNED_RESPONSES: Final = 4
KEY_CANNED_RESPONSE_PREF_1: Final = "canned_response_pref_1"
KEY_CANNED_RESPONSE_PREF_2: Final = "canned_response_pref_2"
KEY_CANNED_RESPONSE_PREF_3: Final = "canned_response_pref_3"
KEY_CANNED_RESPONSE_PREF_4: Final = "canned_response_pref_4"

CANNED_RESPONSE_KEYS: Final = (
    KEY_CANNED_RESPONSE_PREF_1,
    KEY_CANNED_RESPONSE_PREF_2,
    KEY_CANNED_RESPONSE_PREF_3,
    KEY_CANNED_RESPONSE_PREF_4,
)

RESOURCE_CANNED_RESPONSE_IDS: Final = (
    "respond_via_sms_canned_response_1",
    "respond_via_sms_canned_response_2",
    "respond_via_sms_canned_response_3",
    "respond_via_sms_canned_response_4",
)

PREFS_DIR_NAME: Final = "shared_prefs"
