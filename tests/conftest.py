"""Shared pytest configuration for perflimit tests."""

from __future__ import annotations

import pytest

from perflimit.register_maps import load_layout


@pytest.fixture
def layout():
    return load_layout()


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep tests away from the user's config file and env overrides."""
    monkeypatch.setenv("PERFLIMIT_CONFIG", str(tmp_path / "no-such-config.yaml"))
    monkeypatch.delenv("PERFLIMIT_READER", raising=False)
    monkeypatch.delenv("PERFLIMIT_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
