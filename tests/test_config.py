"""Tests for GuiConfig defaults and validation."""

import pytest

from chessgui.config import GuiConfig
from chessgui.core.enums import Orientation
from chessgui.interaction.oracle import ScanScope


def test_defaults() -> None:
    cfg = GuiConfig()
    assert cfg.square_size == 96
    assert cfg.window_width == 768
    assert cfg.window_height == 768
    assert cfg.initial_orientation == Orientation.NORMAL
    assert cfg.scan_scope == ScanScope.ALL_PIECES


def test_start_flipped() -> None:
    assert GuiConfig(start_flipped=True).initial_orientation == Orientation.FLIPPED


def test_window_follows_square_size() -> None:
    assert GuiConfig(square_size=64).window_width == 512


@pytest.mark.parametrize(
    "kwargs",
    [
        {"square_size": 0},
        {"oracle_cache_size": -1},
        {"board_theme": "Neon"},
    ],
)
def test_invalid_values_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        GuiConfig(**kwargs)
