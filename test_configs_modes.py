"""Runs the Configuration page scenarios in a fresh pytest process.

Settings are read once at import time, so each mode of test_configs.py gets
its own process with its own TEST_* environment.
"""

import os
from pathlib import Path

import pytest

pytestmark = pytest.mark.e2e

PROJECT_DIR = Path(__file__).resolve().parent


@pytest.fixture
def scenario_suite(pytester: pytest.Pytester, monkeypatch):
    """Copy the scenario module and conftest into a scratch dir; returns a runner."""
    for name in list(os.environ):
        if name.startswith("TEST_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("PYTHONPATH", str(PROJECT_DIR))

    pytester.makeconftest((PROJECT_DIR / "conftest.py").read_text())
    pytester.makepyfile(test_configs=(PROJECT_DIR / "test_configs.py").read_text())

    def run(*args, **env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return pytester.runpytest_subprocess("-rs", "-p", "no:cacheprovider", *args, timeout=300)

    return run


def test_table_mode_runs_every_scenario(scenario_suite):
    result = scenario_suite(TEST_CONFIG_PAGE_EXPECTS_TABLE_DATA="true")

    result.assert_outcomes(passed=4)


def test_forbidden_mode_skips_table_scenarios(scenario_suite):
    result = scenario_suite(TEST_CONFIG_PAGE_EXPECTS_TABLE_DATA="false")

    result.assert_outcomes(passed=2, skipped=2)
    result.stdout.fnmatch_lines(["*TEST_CONFIG_PAGE_EXPECTS_TABLE_DATA=true*"])


def test_base_url_option_targets_given_server(scenario_suite, stub_server_factory):
    """Test that --base-url is used instead of starting a stub UI."""
    server = stub_server_factory(sections={"custom": {"marker_key": "marker value"}})

    result = scenario_suite(
        "--base-url", server.url,
        TEST_CONFIG_PAGE_EXPECTS_TABLE_DATA="true",
        TEST_CONFIG_PAGE_EXPECTED_SECTION="custom",
        TEST_CONFIG_PAGE_EXPECTED_KEY="marker_key",
    )

    # The default stub has no custom.marker_key row, so scenario 3 only passes on this server
    result.assert_outcomes(passed=4)
