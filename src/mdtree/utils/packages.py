#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/utils/packages.py
"""Installed-distribution lookups backing ``@requires_dependencies``."""

from __future__ import annotations

from importlib import metadata
from typing import Optional, Tuple

from packaging import version
from packaging.specifiers import SpecifierSet


def get_package_version(package_name: str) -> Optional[str]:
    """Return the installed version of a distribution, or None when absent.

    ``package_name`` is the name used with pip (``mistune``), which is not
    always the import name.
    """
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Test an installed distribution against a PEP 440 specifier.

    Parameters
    ----------
    package_name : str
        Distribution name
    version_spec : str
        Specifier such as ``">=3.0.0"`` or ``">=3.0,<4"``

    Returns
    -------
    tuple of (bool, str or None)
        Whether the requirement is met, and the installed version (None when
        the distribution is not installed)

    """
    installed = get_package_version(package_name)
    if installed is None:
        return False, None
    return version.parse(installed) in SpecifierSet(version_spec), installed
