"""Tests for lightbot.config.types."""

from __future__ import annotations

import dataclasses

import pytest

from lightbot.config.constants import DEFAULT_MAX_DEPTH, LIGHT_TOGGLES
from lightbot.config.types import InterpreterConfig


class TestInterpreterConfig:
    def test_defaults(self) -> None:
        config = InterpreterConfig()
        assert config.max_depth == DEFAULT_MAX_DEPTH
        assert config.max_steps is None
        assert config.validate_nesting is True
        assert config.reject_recursion is True

    def test_invalid_max_depth(self) -> None:
        with pytest.raises(ValueError, match="max_depth must be >= 1"):
            InterpreterConfig(max_depth=0)

    def test_invalid_max_steps(self) -> None:
        with pytest.raises(ValueError, match="max_steps must be >= 1"):
            InterpreterConfig(max_steps=0)

    def test_is_frozen(self) -> None:
        config = InterpreterConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_depth = 5  # type: ignore[misc]


def test_light_toggles_are_involutions() -> None:
    for before, after in LIGHT_TOGGLES.items():
        assert LIGHT_TOGGLES[after] == before
