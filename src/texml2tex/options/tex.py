#  Copyright (c) 2025 Tom Villani, Ph.D.

# texml2tex/options/tex.py
"""Configuration options for TeX rendering.

This module defines options for converting a TeXML node tree to TeX source.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from texml2tex.constants import DEFAULT_NEWLINE_HINTS, DEFAULT_VERBATIM_ENVIRONMENTS
from texml2tex.options.base import BaseRendererOptions


@dataclass(frozen=True)
class TexRendererOptions(BaseRendererOptions):
    """Configuration options for tree-to-TeX rendering.

    Parameters
    ----------
    newline_hints : bool, default True
        Honour the ``nl1``/``nl2`` attributes of ``cmd`` nodes, which put a
        newline before and after the command. When False they are ignored.
    verbatim_environments : tuple[str, ...], default ("verbatim",)
        Environment names whose direct text children are emitted unescaped.

    """

    newline_hints: bool = field(
        default=DEFAULT_NEWLINE_HINTS,
        metadata={"help": "Honour nl1/nl2 newline hints on commands", "cli_name": "no-newline-hints"},
    )
    verbatim_environments: tuple[str, ...] = field(
        default=DEFAULT_VERBATIM_ENVIRONMENTS,
        metadata={"help": "Environments whose text is copied without escaping", "cli_name": "verbatim-env"},
    )

    def __post_init__(self) -> None:
        """Normalize and validate the verbatim environment names.

        Raises
        ------
        ValueError
            If an environment name is empty.

        """
        super().__post_init__()
        # Frozen, so bypass __setattr__ to store the tuple form
        object.__setattr__(self, "verbatim_environments", tuple(self.verbatim_environments))
        if any(not name for name in self.verbatim_environments):
            raise ValueError("verbatim_environments must not contain empty names")
