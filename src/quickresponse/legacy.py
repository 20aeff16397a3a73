"""Access to another component's preference namespace.

Opening a foreign component's store is fallible: the component may not be
installed. :func:`resolve_legacy_source` folds that failure into
:class:`LegacyUnavailable` so callers can branch on a value instead of
handling exceptions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias

from quickresponse.paths import get_component_dir, get_data_dir, get_preferences_path
from quickresponse.store import InMemoryPreferenceStore, TomlPreferenceStore

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from quickresponse.store import PreferenceStore

logger = logging.getLogger(__name__)


class ComponentNotFoundError(Exception):
    """Raised when a component's storage cannot be located."""

    def __init__(self, component: str) -> None:
        super().__init__(f"Component not found: {component}")
        self.component = component


class ComponentStoreOpener(Protocol):
    """Opens a read-only handle to another component's namespace."""

    def open(self, component: str, namespace: str) -> PreferenceStore: ...


@dataclass(frozen=True, slots=True)
class LegacyAvailable:
    """The legacy component was found; ``store`` reads its namespace."""

    store: PreferenceStore


@dataclass(frozen=True, slots=True)
class LegacyUnavailable:
    """The legacy component could not be reached."""

    reason: str


LegacySource: TypeAlias = LegacyAvailable | LegacyUnavailable


class FileComponentOpener:
    """Opens component namespaces laid out under a shared data directory."""

    def __init__(self, data_dir: Path | None = None) -> None:
        self._data_dir = data_dir

    @property
    def data_dir(self) -> Path:
        return self._data_dir or get_data_dir()

    def open(self, component: str, namespace: str) -> PreferenceStore:
        if not get_component_dir(component, self.data_dir).is_dir():
            raise ComponentNotFoundError(component)
        return TomlPreferenceStore(
            get_preferences_path(component, namespace, self.data_dir), read_only=True
        )


class InMemoryComponentOpener:
    """Opener over a fixed table of in-memory namespaces.

    ``components`` maps component id to ``{namespace: values}``. A component
    missing from the table is treated as not installed; a known component
    with no data for the namespace yields an empty store.
    """

    def __init__(self, components: Mapping[str, Mapping[str, Mapping[str, str]]] | None = None):
        self._components = {name: dict(spaces) for name, spaces in (components or {}).items()}

    def open(self, component: str, namespace: str) -> PreferenceStore:
        if component not in self._components:
            raise ComponentNotFoundError(component)
        return InMemoryPreferenceStore(self._components[component].get(namespace), read_only=True)


def resolve_legacy_source(
    opener: ComponentStoreOpener, component: str, namespace: str
) -> LegacySource:
    """Open the legacy namespace, absorbing a missing component."""
    try:
        store = opener.open(component, namespace)
    except ComponentNotFoundError as exc:
        logger.warning(
            "Can't find %s component, legacy quick responses unavailable",
            component,
            exc_info=exc,
            extra={"event": "legacy_unavailable", "namespace": namespace},
        )
        return LegacyUnavailable(reason=str(exc))
    return LegacyAvailable(store=store)
