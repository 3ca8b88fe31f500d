"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from scentfield import (
    EmitterStore,
    HexCoord,
    HexMapGeometry,
    Signals,
    SignalType,
)


@pytest.fixture
def signals() -> Signals:
    """Fresh, empty field."""
    return Signals()


@pytest.fixture
def geometry() -> HexMapGeometry:
    """Open hex map of radius 4 with nothing occupied."""
    return HexMapGeometry(radius=4)


@pytest.fixture
def store() -> EmitterStore:
    return EmitterStore()


@pytest.fixture
def origin() -> HexCoord:
    return HexCoord(0, 0)


@pytest.fixture
def wood_pull() -> SignalType:
    return SignalType.pull("wood")
