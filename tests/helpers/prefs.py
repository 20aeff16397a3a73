from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING

from quickresponse.constants import LEGACY_COMPONENT, SHARED_PREFERENCES_NAME
from quickresponse.legacy import InMemoryComponentOpener
from quickresponse.paths import get_preferences_path

if TYPE_CHECKING:
    from pathlib import Path


def _build_prefs_toml(values: dict[str, str], *, header_comment: str | None = None) -> str:
    """Build a flat preference table, escaping values the way TOML basic strings need."""
    lines: list[str] = []
    if header_comment:
        lines.append(f"# {header_comment}")
    for key, value in values.items():
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'{key} = "{escaped}"')
    return "\n".join(lines) + "\n"


def write_prefs_file(
    data_dir: Path,
    component: str,
    values: dict[str, str],
    *,
    namespace: str = SHARED_PREFERENCES_NAME,
    header_comment: str | None = None,
) -> Path:
    """Write a component's preference file, creating the component directory."""
    path = get_preferences_path(component, namespace, data_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(_build_prefs_toml(values, header_comment=header_comment), encoding="utf-8")
    return path


def read_prefs_file(path: Path) -> dict[str, str]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def legacy_opener(values: dict[str, str] | None) -> InMemoryComponentOpener:
    """Opener where the legacy component is installed with ``values`` in its namespace."""
    return InMemoryComponentOpener({LEGACY_COMPONENT: {SHARED_PREFERENCES_NAME: values or {}}})
