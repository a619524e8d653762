"""Shared fixtures for Catalog Toolkit tests.

Every test runs against an isolated user config directory so nothing is
written to the real home directory, and with a fresh ConfigManager.
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog_toolkit.config import ConfigManager
from catalog_toolkit.core.index import Index


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the user config directory at a temp dir and reset the singleton."""
    config_dir = tmp_path / "user_config"
    monkeypatch.setenv("CATALOG_CONFIG_DIR", str(config_dir))
    ConfigManager.reset()
    yield config_dir
    ConfigManager.reset()


@pytest.fixture
def sample_entries():
    """A small catalog with nesting, extra metadata and a duplicate url.

    Pre-order: /intro, /part-1, /part-1/ch-1, /part-1/ch-2, /appendix, /intro
    """
    return [
        {"url": "/intro", "title": "Introduction"},
        {
            "url": "/part-1",
            "title": "Part One",
            "children": [
                {"url": "/part-1/ch-1", "title": "Chapter 1"},
                {"url": "/part-1/ch-2#top", "title": "Chapter 2"},
            ],
        },
        {"url": "/appendix", "children": [{"url": "/intro", "title": "Intro again"}]},
    ]


@pytest.fixture
def index(sample_entries):
    """An Index built from ``sample_entries`` with an up-to-date cache."""
    idx = Index()
    idx.parse(sample_entries)
    idx.update()
    return idx


@pytest.fixture
def index_file(tmp_path, sample_entries):
    """``sample_entries`` written as a JSON index file."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(sample_entries), encoding="utf-8")
    return path
