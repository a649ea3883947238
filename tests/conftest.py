"""Pytest configuration and shared fixtures for the texml2tex test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from texml2tex.ast import Node, element

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


SAMPLE_TEXML = """<?xml version="1.0" encoding="UTF-8"?>
<TeXML>
<cmd name="documentclass"><opt>12pt</opt><parm>article</parm></cmd>
<env name="document">
<cmd name="section" nl1="1"><parm>Costs &amp; benefits</parm></cmd>
Saving 50% on <cmd name="emph"><parm>every</parm></cmd> item_1.
<env name="verbatim">raw $x_1$ &amp; {braces}</env>
</env>
</TeXML>
"""


@pytest.fixture
def sample_texml() -> str:
    """Provide a small but complete TeXML document as text."""
    return SAMPLE_TEXML


@pytest.fixture
def section_document() -> Node:
    r"""Provide root -> cmd[section] -> parm -> "Intro_duction"."""
    return element(
        "TeXML",
        children=[element("cmd", {"name": "section"}, [element("parm", children=["Intro_duction"])])],
    )
