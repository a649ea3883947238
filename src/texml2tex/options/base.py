#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texml2tex/options/base.py
"""Base classes for parser and renderer options.

Options are frozen dataclasses: a parser or renderer can hold them, and be
shared between threads, without anyone changing its configuration under it.
Variants are made with :meth:`CloneFrozenMixin.create_updated`.
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
    """Mixin providing copy-with-changes for frozen option dataclasses."""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return the names of the option fields, in declaration order."""
        return tuple(f.name for f in fields(cls))

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated; the new values are
            validated like constructor arguments

        Raises
        ------
        ValueError
            If a keyword is not an option of this class, or a value fails
            validation

        """
        valid = self.field_names()
        unknown = sorted(set(kwargs) - set(valid))
        if unknown:
            raise ValueError(
                f"Unknown option(s) for {type(self).__name__}: {', '.join(unknown)}. "
                f"Valid options: {', '.join(valid)}"
            )
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Notes
    -----
    Subclasses define their settings as frozen dataclass fields with a
    ``help`` entry in the field metadata.

    """

    def __post_init__(self) -> None:
        """Validate options. Subclasses extend this."""


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Notes
    -----
    Subclasses define their settings as frozen dataclass fields with a
    ``help`` entry in the field metadata.

    """

    def __post_init__(self) -> None:
        """Validate options. Subclasses extend this."""
