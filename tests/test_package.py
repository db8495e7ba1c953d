"""Tests for the wren top-level lazy API."""

import pytest

import wren


class TestLazyImports:
    def test_version(self) -> None:
        assert wren.__version__

    @pytest.mark.parametrize("name", wren.__all__)
    def test_public_names_resolve(self, name: str) -> None:
        assert getattr(wren, name) is not None

    def test_router_is_routing_router(self) -> None:
        from wren.routing.router import Router

        assert wren.Router is Router

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError, match="no attribute 'nope'"):
            _ = wren.nope


class TestPackaging:
    def test_python_floor_matches_template_engine(self) -> None:
        """kida-templates only publishes releases for Python 3.14+."""
        import tomllib
        from pathlib import Path

        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        project = tomllib.loads(pyproject.read_text())["project"]
        assert project["requires-python"] == ">=3.14"
        assert any(dep.startswith("kida-templates") for dep in project["dependencies"])
