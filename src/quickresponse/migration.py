"""Lazy migration of quick responses into the current component's store.

Quick responses used to live in the telephony component and now belong to
telecom. Migration happens on first use rather than at install time:

* If the current store already has responses, nothing happens. The user has
  chosen their responses and abandoned any older ones.
* Otherwise responses are copied from the legacy store, slot by slot, with
  each missing slot falling back to its compiled-in default.
* If the legacy component is not installed, the defaults are used as-is.

Either way the current store holds all four responses afterwards.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quickresponse.constants import (
    CANNED_RESPONSE_KEYS,
    KEY_CANNED_RESPONSE_PREF_1,
    LEGACY_COMPONENT,
    SHARED_PREFERENCES_NAME,
)
from quickresponse.legacy import (
    FileComponentOpener,
    LegacyAvailable,
    LegacyUnavailable,
    resolve_legacy_source,
)
from quickresponse.models import QuickResponseSet
from quickresponse.paths import ensure_directories, get_preferences_path
from quickresponse.resources import StaticResources, canned_response_defaults
from quickresponse.store import StoreCorruptedError, TomlPreferenceStore

if TYPE_CHECKING:
    from quickresponse.config import QuickResponseConfig
    from quickresponse.legacy import ComponentStoreOpener
    from quickresponse.resources import ResourceProvider
    from quickresponse.store import PreferenceStore

logger = logging.getLogger(__name__)


class QuickResponseMigrator:
    """Populates the current store with quick responses on first use."""

    def __init__(
        self,
        current: PreferenceStore,
        legacy_opener: ComponentStoreOpener,
        resources: ResourceProvider,
        *,
        legacy_component: str = LEGACY_COMPONENT,
        namespace: str = SHARED_PREFERENCES_NAME,
    ) -> None:
        self.current = current
        self.legacy_opener = legacy_opener
        self.resources = resources
        self.legacy_component = legacy_component
        self.namespace = namespace

    @classmethod
    def from_config(cls, config: QuickResponseConfig) -> QuickResponseMigrator:
        """Wire file-backed stores for the components named in ``config``."""
        ensure_directories()
        general = config.general
        opener = FileComponentOpener()
        current = TomlPreferenceStore(
            get_preferences_path(general.current_component, general.namespace, opener.data_dir)
        )
        return cls(
            current,
            opener,
            StaticResources(),
            legacy_component=general.legacy_component,
            namespace=general.namespace,
        )

    def _log(self, event: str, message: str, *args: object) -> None:
        logger.debug(message, *args, extra={"event": event, "namespace": self.namespace})

    def migrate(self) -> bool:
        """Ensure the current store holds all four quick responses.

        Returns:
            True if responses were written, False if they already existed.
        """
        self._log("start", "Quick response migration starting")
        with self.current.lock():
            # Slots are only ever written together, so checking the first is enough.
            if self.current.contains(KEY_CANNED_RESPONSE_PREF_1):
                self._log("skip_existing", "Quick responses already exist in %s", self.namespace)
                return False

            responses = canned_response_defaults(self.resources)
            self._log("no_local", "No local quick responses, checking %s", self.legacy_component)

            match resolve_legacy_source(self.legacy_opener, self.legacy_component, self.namespace):
                case LegacyAvailable(store=legacy):
                    # An unreadable legacy file counts as empty.
                    try:
                        legacy_values = legacy.snapshot()
                    except StoreCorruptedError as exc:
                        logger.warning(
                            "Ignoring unreadable %s quick responses",
                            self.legacy_component,
                            exc_info=exc,
                            extra={"event": "legacy_corrupted", "namespace": self.namespace},
                        )
                    else:
                        self._log(
                            "legacy_used", "Using %s quick responses", self.legacy_component
                        )
                        responses = [
                            legacy_values.get(key, default)
                            for key, default in zip(CANNED_RESPONSE_KEYS, responses, strict=True)
                        ]
                case LegacyUnavailable():
                    pass

            self.current.batch_write(dict(zip(CANNED_RESPONSE_KEYS, responses, strict=True)))
        self._log("done", "Quick response migration done")
        return True

    def load(self) -> QuickResponseSet:
        """Migrate if needed, then read the four responses."""
        self.migrate()
        return QuickResponseSet.from_preferences(
            self.current.snapshot(), defaults=canned_response_defaults(self.resources)
        )


def maybe_migrate_legacy_quick_responses(
    current: PreferenceStore,
    legacy_opener: ComponentStoreOpener,
    resources: ResourceProvider,
    *,
    legacy_component: str = LEGACY_COMPONENT,
    namespace: str = SHARED_PREFERENCES_NAME,
) -> bool:
    """Function form of :meth:`QuickResponseMigrator.migrate`."""
    migrator = QuickResponseMigrator(
        current,
        legacy_opener,
        resources,
        legacy_component=legacy_component,
        namespace=namespace,
    )
    return migrator.migrate()


def load_quick_responses(
    current: PreferenceStore,
    legacy_opener: ComponentStoreOpener,
    resources: ResourceProvider,
    *,
    legacy_component: str = LEGACY_COMPONENT,
    namespace: str = SHARED_PREFERENCES_NAME,
) -> QuickResponseSet:
    """Read the quick responses, migrating them first if this is the first read."""
    migrator = QuickResponseMigrator(
        current,
        legacy_opener,
        resources,
        legacy_component=legacy_component,
        namespace=namespace,
    )
    return migrator.load()
