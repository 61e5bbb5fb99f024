"""Tests for the display configuration."""

from collections.abc import Iterator

import pytest

import pyok as pk


@pytest.fixture(autouse=True)
def _restore_config() -> Iterator[None]:
    yield
    pk.get_config().reset()


def test_get_config_is_shared() -> None:
    """Every call returns the same instance."""
    assert pk.get_config() is pk.get_config()


def test_defaults() -> None:
    """Default limits."""
    cfg = pk.Config()
    assert (cfg.max_string, cfg.max_items, cfg.max_depth, cfg.max_other) == (
        60,
        10,
        3,
        80,
    )


def test_long_collections_are_truncated() -> None:
    """max_items bounds the rendered collection."""
    pk.get_config().max_items = 2
    assert repr(pk.Some([1, 2, 3])) == "Some(value=[1, 2, ...])"
    assert repr(pk.Err((1, 2, 3))) == "Err(error=(1, 2, ...))"


def test_long_strings_are_truncated() -> None:
    """max_string bounds the rendered string."""
    pk.get_config().max_string = 10
    rendered = repr(pk.Ok("x" * 100))
    assert rendered.startswith("Ok(value='x")
    assert "..." in rendered
    assert len(rendered) < 30


def test_reset() -> None:
    """reset restores the defaults."""
    cfg = pk.get_config()
    cfg.max_items = 1
    cfg.reset()
    assert cfg.max_items == 10


def test_config_never_changes_behaviour() -> None:
    """Only the rendering is affected."""
    pk.get_config().max_items = 1
    payload = [1, 2, 3]
    assert pk.Some(payload).unwrap() is payload
    assert pk.Some(payload) == pk.Some([1, 2, 3])
