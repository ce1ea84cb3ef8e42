#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/utils/decorators.py
"""Decorators shared by mdtree components.

- requires_dependencies: guard a method that imports an optional package
- debug_timer: log how long a block took, only when DEBUG is enabled
"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Optional, Tuple

from mdtree.exceptions import DependencyError
from mdtree.utils.packages import check_version_requirement

PackageSpec = Tuple[str, str, str]


def _find_problems(
    packages: List[PackageSpec],
) -> tuple[list[tuple[str, str]], list[tuple[str, str, str]], Optional[ImportError]]:
    """Return missing packages, version mismatches and the first ImportError."""
    missing: list[tuple[str, str]] = []
    mismatches: list[tuple[str, str, str]] = []
    first_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            if first_error is None:
                first_error = e
            continue

        if version_spec:
            ok, installed = check_version_requirement(install_name, version_spec)
            if not ok:
                mismatches.append((install_name, version_spec, installed or "unknown"))

    return missing, mismatches, first_error


def requires_dependencies(component_name: str, packages: List[PackageSpec]) -> Callable:
    """Check optional dependencies every time the decorated method runs.

    Parameters
    ----------
    component_name : str
        Name reported in the error message (e.g., "markdown")
    packages : list of (install_name, import_name, version_spec)
        ``install_name`` is the pip name, ``import_name`` the module to
        import and ``version_spec`` a PEP 440 specifier ("" accepts any
        installed version)

    Returns
    -------
    Callable
        Decorator for the method

    Raises
    ------
    DependencyError
        Raised by the wrapped method, listing every missing package and
        version mismatch at once

    Examples
    --------
        >>> @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        ... def tokenize(self, text):
        ...     import mistune

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing, mismatches, first_error = _find_problems(packages)
            if missing or mismatches:
                raise DependencyError(
                    component_name=component_name,
                    missing_packages=missing,
                    version_mismatches=mismatches,
                    original_import_error=first_error,
                ) from first_error
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the elapsed time of the enclosed block at DEBUG level.

    Nothing is measured when ``logger`` is not enabled for DEBUG.

    Examples
    --------
        >>> with debug_timer(logger, "Reconstruction"):
        ...     blocks = reconstruct(events)

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return
    start = time.perf_counter()
    yield
    logger.debug("%s completed in %.2fs", operation, time.perf_counter() - start)
