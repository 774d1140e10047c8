"""Tests for wren.cli._resolve — Navigator import resolution."""

import sys
import types

import pytest

from wren.cli._resolve import resolve_navigator
from wren.navigator import Navigator


def _broken_factory() -> Navigator:
    raise RuntimeError("nope")


@pytest.fixture
def _fake_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with wren Navigators on sys.modules."""
    mod = types.ModuleType("_fake_wren_nav")
    mod.navigator = Navigator()  # type: ignore[attr-defined]
    mod.custom = Navigator()  # type: ignore[attr-defined]
    mod.make = Navigator  # type: ignore[attr-defined]
    mod.broken = _broken_factory  # type: ignore[attr-defined]
    mod.not_a_navigator = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_wren_nav", mod)


@pytest.mark.usefixtures("_fake_module")
class TestResolveNavigator:
    def test_explicit_attribute(self) -> None:
        assert resolve_navigator("_fake_wren_nav:custom") is sys.modules["_fake_wren_nav"].custom

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'navigator'."""
        assert isinstance(resolve_navigator("_fake_wren_nav"), Navigator)

    def test_factory_function(self) -> None:
        assert isinstance(resolve_navigator("_fake_wren_nav:make"), Navigator)

    def test_factory_error(self) -> None:
        with pytest.raises(TypeError, match="raised an error"):
            resolve_navigator("_fake_wren_nav:broken")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_navigator("nonexistent_module_xyz:navigator")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_navigator("_fake_wren_nav:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match=r"not a wren\.Navigator instance"):
            resolve_navigator("_fake_wren_nav:not_a_navigator")
