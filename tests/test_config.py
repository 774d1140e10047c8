"""Tests for wren.config — NavigatorConfig frozen dataclass."""

import pytest

from wren.config import NavigatorConfig


class TestNavigatorConfig:
    def test_defaults(self) -> None:
        cfg = NavigatorConfig()
        assert cfg.scheme == ""
        assert cfg.debug is False

    def test_override(self) -> None:
        cfg = NavigatorConfig(scheme="myapp", debug=True)
        assert cfg.scheme == "myapp"
        assert cfg.debug is True

    def test_stored_as_given(self) -> None:
        """Normalization happens in the Navigator, not the config."""
        assert NavigatorConfig(scheme="myapp://").scheme == "myapp://"

    def test_frozen(self) -> None:
        cfg = NavigatorConfig()
        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]
