"""Pytest fixtures for quickresponse tests."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

from quickresponse.constants import RESOURCE_CANNED_RESPONSE_IDS
from quickresponse.legacy import InMemoryComponentOpener
from quickresponse.resources import StaticResources
from quickresponse.store import InMemoryPreferenceStore

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="quickresponse-tests-"))
os.environ["QUICKRESPONSE_DATA_DIR"] = str(_TEST_BASE_DIR / "data")
os.environ["QUICKRESPONSE_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")

if TYPE_CHECKING:
    from collections.abc import Generator


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

DEFAULT_RESPONSES = ["Can't talk now.", "On my way.", "Call me later.", "What's up?"]


@pytest.fixture(autouse=True)
def _clean_data_dir() -> Generator[None, None, None]:
    """Ensure preference files don't leak between tests."""
    yield
    shutil.rmtree(Path(os.environ["QUICKRESPONSE_DATA_DIR"]), ignore_errors=True)
    shutil.rmtree(Path(os.environ["QUICKRESPONSE_CONFIG_DIR"]), ignore_errors=True)


@pytest.fixture
def resources() -> StaticResources:
    return StaticResources(dict(zip(RESOURCE_CANNED_RESPONSE_IDS, DEFAULT_RESPONSES, strict=True)))


@pytest.fixture
def current_store() -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore()


@pytest.fixture
def no_legacy() -> InMemoryComponentOpener:
    """Opener for a system where the legacy component is not installed."""
    return InMemoryComponentOpener()

