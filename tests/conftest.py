"""Pytest configuration and shared fixtures for the cliparser test suite.

This module provides shared fixtures and test configuration used across
the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from cliparser import AppBuilder, ArgSpec, ArgSpecRegistry, CliApp

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def boolean_registry() -> ArgSpecRegistry:
    """Registry with three optional boolean flags ``a``, ``b`` and ``c``."""
    return ArgSpecRegistry(
        [
            ArgSpec.make("a", "all", "Show everything"),
            ArgSpec.make("b", "brief", "Short output"),
            ArgSpec.make("c", "color", "Colorize output"),
        ]
    )


@pytest.fixture
def mixed_registry() -> ArgSpecRegistry:
    """Registry with a required value flag ``o``, a value flag ``i`` and a boolean ``q``."""
    return ArgSpecRegistry(
        [
            ArgSpec.make("o", "output", "Output file", required=True, needs_value=True),
            ArgSpec.make("i", "include", "Include pattern", needs_value=True),
            ArgSpec.make("q", "quiet", "Less output"),
        ]
    )


@pytest.fixture
def sample_app() -> CliApp:
    """Application resembling the sandbox: one required flag and one required value flag."""
    return (
        AppBuilder("Cool app")
        .arg(ArgSpec.make("n", "numberlines", "Adds line numbers.", required=True))
        .arg(ArgSpec.make("i", "insensitive", "Case insensitive pattern matching", required=True, needs_value=True))
        .usage("SANDBOX <args> flags...")
        .author("Jane Doe")
        .version("0.1.57")
        .build()
    )
