"""Unit tests for utils/packages.py."""

from unittest.mock import patch

import pytest

from mdtree.utils.packages import check_version_requirement, get_package_version


@pytest.mark.unit
class TestPackageVersions:
    """Test version lookup and requirement checks."""

    def test_installed_package(self):
        assert get_package_version("packaging") is not None

    def test_missing_package(self):
        assert get_package_version("nonexistent-mdtree-package") is None

    def test_missing_package_fails_requirement(self):
        assert check_version_requirement("nonexistent-mdtree-package", ">=1.0") == (False, None)

    @pytest.mark.parametrize(
        "installed,spec,expected",
        [
            ("3.0.2", ">=3.0.0", True),
            ("2.0.3", ">=3.0.0", False),
            ("3.1.0", ">=3.0,<4", True),
        ],
    )
    def test_specifier(self, installed, spec, expected):
        with patch("mdtree.utils.packages.get_package_version", return_value=installed):
            assert check_version_requirement("mistune", spec) == (expected, installed)
