"""Tests for version resolution (core/versioning.py, infra/package_version.py)."""

from __future__ import annotations

import importlib.metadata
from unittest.mock import patch

import pytest

from cmdline_utils import __version__
from cmdline_utils.core.versioning import StaticVersionSource, resolve_version
from cmdline_utils.exceptions import PreconditionError
from cmdline_utils.infra.package_version import PackageVersionSource


# ---------------------------------------------------------------------------
# resolve_version
# ---------------------------------------------------------------------------

class TestResolveVersion:
    def test_informational_version_wins(self) -> None:
        source = StaticVersionSource(version="1.2.3.0", informational_version="1.2.3-beta")
        assert resolve_version(source) == "1.2.3-beta"

    @pytest.mark.parametrize("informational", [None, "", "   ", "\t\n"])
    def test_blank_informational_falls_back(self, informational: str | None) -> None:
        source = StaticVersionSource(version="2.0.0.0", informational_version=informational)
        assert resolve_version(source) == "2.0.0.0"

    def test_nothing_available_returns_none(self) -> None:
        assert resolve_version(StaticVersionSource()) is None

    def test_none_source_fails_fast(self) -> None:
        with pytest.raises(PreconditionError):
            resolve_version(None)


# ---------------------------------------------------------------------------
# PackageVersionSource
# ---------------------------------------------------------------------------

class TestPackageVersionSource:
    def test_informational_is_module_dunder_version(self) -> None:
        assert PackageVersionSource("cmdline_utils").informational_version == __version__

    def test_missing_package(self) -> None:
        source = PackageVersionSource("no_such_package_xyz", distribution="no-such-package-xyz")
        assert source.informational_version is None
        assert source.version is None

    def test_version_reads_distribution_metadata(self) -> None:
        source = PackageVersionSource("cmdline_utils", distribution="cmdline-utils")
        with patch.object(importlib.metadata, "version", return_value="9.9.9") as mock_version:
            assert source.version == "9.9.9"
        mock_version.assert_called_once_with("cmdline-utils")

    def test_module_without_dunder_version(self) -> None:
        assert PackageVersionSource("textwrap").informational_version is None

    def test_resolves_end_to_end(self) -> None:
        assert resolve_version(PackageVersionSource("cmdline_utils")) == __version__
