"""Tests for the package version lookup."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError

import labelenum
from labelenum import _version


class TestGetVersion:
    def test_reads_distribution_metadata(self, monkeypatch):
        monkeypatch.setattr(_version, "version", lambda name: "9.9.9")
        assert _version.get_version() == "9.9.9"

    def test_uninstalled_tree_falls_back(self, monkeypatch):
        def missing(name):
            raise PackageNotFoundError(name)

        monkeypatch.setattr(_version, "version", missing)
        assert _version.get_version() == "0.0.0"

    def test_package_exposes_version(self):
        assert isinstance(labelenum.__version__, str)
        assert labelenum.__version__
