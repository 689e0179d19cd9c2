"""Pytest configuration for the i18nkit test suite.

Hypothesis profiles:
- dev: Local development, 100 examples per property
- ci: CI runs, 50 derandomized examples (reproducible failures)
- fuzz: 2000 examples, loaded automatically for `pytest -m fuzz`
- verbose: 25 examples with per-example output for debugging

Profile selection:
- HYPOTHESIS_PROFILE env var -> explicit override
- `-m fuzz` on the command line -> "fuzz" profile
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Deadlines are disabled: the first example of a run pays for loading CLDR
data through Babel, which would otherwise be reported as a flaky deadline.

Tests marked with @pytest.mark.fuzz are skipped unless requested with -m fuzz.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=100, phases=_PHASES, deadline=None)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, deadline=None, derandomize=True, print_blob=True
)
settings.register_profile("fuzz", max_examples=2000, phases=_PHASES, deadline=None)
settings.register_profile(
    "verbose", max_examples=25, phases=_PHASES, deadline=None, verbosity=Verbosity.verbose
)

_PROFILES = ("dev", "ci", "fuzz", "verbose")


def _fuzz_requested(config: pytest.Config) -> bool:
    return "fuzz" in str(config.getoption("-m", default=""))


def _detect_profile(config: pytest.Config) -> str:
    """Pick the Hypothesis profile for this run (see module docstring)."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in _PROFILES:
        return explicit
    if _fuzz_requested(config):
        return "fuzz"
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker and load the Hypothesis profile."""
    config.addinivalue_line(
        "markers",
        "fuzz: long-running property tests (skipped unless run with -m fuzz)",
    )
    settings.load_profile(_detect_profile(config))


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    if _fuzz_requested(config):
        return

    skip_fuzz = pytest.mark.skip(reason="long-running property test, run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
