"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from uses.config import UsesConfig
from uses.domain.graph import DependencyGraph
from uses.platform.wiring import get_config
from uses.settings import Settings

from tests.fakes import SinkSpy


@pytest.fixture
def settings() -> Settings:
    return Settings(on_circular_dependency="warn")


@pytest.fixture
def config(settings: Settings) -> UsesConfig:
    return UsesConfig(settings)


@pytest.fixture
def graph() -> DependencyGraph:
    return DependencyGraph()


@pytest.fixture
def sink_spy() -> SinkSpy:
    return SinkSpy()


@pytest.fixture(autouse=True)
def reset_global_config() -> Iterator[None]:
    """Keep policy and initializer changes from leaking between tests."""

    get_config().reset()
    yield
    get_config().reset()
