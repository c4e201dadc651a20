"""Shared pytest fixtures for aztec-abi tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from aztec_abi.artifacts import load_contract_artifact
from aztec_abi.types import ContractArtifact


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def price_feed_path(fixtures_dir: Path) -> Path:
    """Return path to the sample contract artifact."""
    return fixtures_dir / "price_feed.json"


@pytest.fixture
def price_feed_json(price_feed_path: Path) -> Dict[str, Any]:
    """Load and return the raw sample contract artifact."""
    with open(price_feed_path) as f:
        return json.load(f)


@pytest.fixture
def price_feed_artifact(price_feed_path: Path) -> ContractArtifact:
    """Load and return the parsed sample contract artifact."""
    return load_contract_artifact(price_feed_path)


@pytest.fixture
def temp_artifact(tmp_path: Path, price_feed_json: Dict[str, Any]) -> Path:
    """Write a copy of the sample artifact to a temporary file."""
    artifact_path = tmp_path / "artifacts" / "price_feed.json"
    artifact_path.parent.mkdir(parents=True, exist_ok=True)
    with open(artifact_path, "w") as f:
        json.dump(price_feed_json, f, indent=2)
    return artifact_path
