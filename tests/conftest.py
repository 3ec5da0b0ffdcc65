"""
Global pytest configuration and fixtures.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep the caller's Kubernetes and config settings out of every test."""
    monkeypatch.delenv("K8SCONFIG_CONFIG", raising=False)
    monkeypatch.delenv("K8SCONFIG_DEBUG", raising=False)
    monkeypatch.delenv("KUBERNETES_NAMESPACE", raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample application config files."""
    return Path(__file__).parent / "fixtures" / "application"


@pytest.fixture
def missing_namespace_file(tmp_path) -> Path:
    """A service account namespace path that doesn't exist."""
    return tmp_path / "serviceaccount" / "namespace"
