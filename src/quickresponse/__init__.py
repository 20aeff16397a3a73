"""quickresponse: lazy migration of SMS quick responses between component stores."""

from quickresponse.migration import (
    QuickResponseMigrator,
    load_quick_responses,
    maybe_migrate_legacy_quick_responses,
)
from quickresponse.models import QuickResponseSet

__version__ = "0.1.0"

__all__ = [
    "QuickResponseMigrator",
    "QuickResponseSet",
    "load_quick_responses",
    "maybe_migrate_legacy_quick_responses",
]
