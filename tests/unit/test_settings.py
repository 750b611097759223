"""Tests for settings and packaging configuration."""

import tomllib

import pytest

from settings import ROOT_DIR, seconds_or_none


class TestSecondsOrNone:
    def test_number(self):
        assert seconds_or_none("GOVOS_HTTP_TIMEOUT", "12.5") == 12.5

    def test_zero_disables(self):
        assert seconds_or_none("GOVOS_HTTP_TIMEOUT", "0") is None

    def test_not_a_number(self):
        with pytest.raises(ValueError, match="GOVOS_HTTP_TIMEOUT must be a number of seconds, got 'soon'"):
            seconds_or_none("GOVOS_HTTP_TIMEOUT", "soon")


class TestPackaging:
    def test_namespace_packages_found(self):
        setuptools = pytest.importorskip("setuptools")
        config = tomllib.loads((ROOT_DIR / "pyproject.toml").read_text(encoding="utf-8"))
        find = config["tool"]["setuptools"]["packages"]["find"]
        assert find["namespaces"] is True

        packages = setuptools.find_namespace_packages(where=str(ROOT_DIR), include=find["include"])
        for name in ("app.services.dashboard", "app.models.governance", "web.api.overview", "web.streamlit"):
            assert name in packages
