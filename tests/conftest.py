"""Shared pytest fixtures for the viper test suite.

Provides:
- the example module's assembler and entities
- a recorder handler for channel tests
"""

from __future__ import annotations

from typing import Any, List

import pytest

from screens.example.module import Entities, assembler


class Recorder:
    """Callable handler that remembers every value it received."""

    def __init__(self) -> None:
        self.values: List[Any] = []

    def __call__(self, value: Any) -> None:
        self.values.append(value)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_recorder():
    return Recorder


@pytest.fixture
def example_assembler():
    return assembler()


@pytest.fixture
def entities() -> Entities:
    return Entities(increment=3)
