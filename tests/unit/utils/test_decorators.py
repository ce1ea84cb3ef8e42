"""Unit tests for utils/decorators.py."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

import mdtree.utils.decorators
from mdtree.exceptions import DependencyError
from mdtree.utils.decorators import debug_timer, requires_dependencies


@pytest.mark.unit
class TestRequiresDependencies:
    """Test the requires_dependencies decorator."""

    def test_missing_package_raises_error(self) -> None:
        """Test that a missing package raises DependencyError."""

        @requires_dependencies("test", [("nonexistent-package", "nonexistent_mdtree_pkg", "")])
        def sample_function() -> str:
            return "success"

        with pytest.raises(DependencyError) as exc_info:
            sample_function()

        assert exc_info.value.component_name == "test"
        assert ("nonexistent-package", "") in exc_info.value.missing_packages
        assert exc_info.value.original_import_error is not None
        assert "pip install --upgrade nonexistent-package" in str(exc_info.value)

    def test_version_mismatch_raises_error(self) -> None:
        """Test that an installed package with wrong version raises DependencyError."""
        with patch("mdtree.utils.decorators.importlib.import_module"):
            with patch.object(mdtree.utils.decorators, "check_version_requirement", return_value=(False, "1.0.0")):

                @requires_dependencies("test", [("test-package", "test_package", ">=2.0.0")])
                def sample_function() -> str:
                    return "success"

                with pytest.raises(DependencyError) as exc_info:
                    sample_function()

                assert len(exc_info.value.missing_packages) == 0
                assert ("test-package", ">=2.0.0", "1.0.0") in exc_info.value.version_mismatches

    def test_correct_version_succeeds(self) -> None:
        """Test that an installed package with correct version allows execution."""
        with patch("mdtree.utils.decorators.importlib.import_module"):
            with patch.object(mdtree.utils.decorators, "check_version_requirement", return_value=(True, "2.5.0")):

                @requires_dependencies("test", [("test-package", "test_package", ">=2.0.0")])
                def sample_function() -> str:
                    return "success"

                assert sample_function() == "success"

    def test_no_version_spec_skips_version_check(self) -> None:
        with patch("mdtree.utils.decorators.importlib.import_module"):
            with patch.object(mdtree.utils.decorators, "check_version_requirement") as mock_check:

                @requires_dependencies("test", [("test-package", "test_package", "")])
                def sample_function() -> str:
                    return "success"

                assert sample_function() == "success"
                mock_check.assert_not_called()

    def test_preserves_function_metadata(self) -> None:
        @requires_dependencies("test", [])
        def documented() -> None:
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


@pytest.mark.unit
class TestDebugTimer:
    """Test the debug_timer context manager."""

    def test_logs_when_debug_enabled(self, caplog) -> None:
        logger = logging.getLogger("mdtree.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="mdtree.tests.timer"):
            with debug_timer(logger, "Sample"):
                pass
        assert any("Sample completed in" in record.message for record in caplog.records)

    def test_silent_above_debug(self, caplog) -> None:
        logger = logging.getLogger("mdtree.tests.timer")
        with caplog.at_level(logging.INFO, logger="mdtree.tests.timer"):
            with debug_timer(logger, "Sample"):
                pass
        assert not caplog.records
