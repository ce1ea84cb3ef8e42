#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/options/base.py
"""Base classes for tokenizer and writer options.

Options objects are frozen dataclasses shared freely between renderer and
tokenizer instances. Each field documents itself through its ``help``
metadata, which :meth:`CloneFrozenMixin.describe` collects.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-on-write helpers for frozen option dataclasses."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        The copy goes through ``__post_init__`` again, so invalid values
        raise exactly as they would in the constructor.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            The updated copy; ``self`` is left untouched

        """
        return replace(self, **kwargs)

    @classmethod
    def describe(cls) -> dict[str, str]:
        """Map each field name to its ``help`` text."""
        return {f.name: f.metadata.get("help", "") for f in fields(cls)}


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for writer options; subclasses validate in ``__post_init__``."""

    def __post_init__(self) -> None:
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for tokenizer options."""

    def __post_init__(self) -> None:
        pass
