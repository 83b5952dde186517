"""Shared test fixtures."""

from pathlib import Path

import pytest
from ewiki.config import Config, ServerConfig, WikiConfig


@pytest.fixture
def wiki_dir(tmp_path: Path) -> Path:
    """Create an empty wiki source directory.

    Lives one level below tmp_path so tests can place files outside the root.
    """
    wiki = tmp_path / "wiki"
    wiki.mkdir(exist_ok=True)
    return wiki


@pytest.fixture
def wiki_config(wiki_dir: Path) -> WikiConfig:
    return WikiConfig(source_dir=wiki_dir)


@pytest.fixture
def test_config(wiki_config: WikiConfig) -> Config:
    """Create a test configuration serving wiki_dir at /wiki."""
    return Config(server=ServerConfig(), wiki=wiki_config)
