"""Unit tests for the run_tests.py suite table."""
import argparse
import os

import pytest

import run_tests


def _args(**overrides):
    values = dict(verbose=False, fast=False, slow=False, keyword=None, coverage=False)
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.mark.unit
def test_suite_targets_exist():
    for name, (_, targets) in run_tests.SUITES.items():
        for target in targets:
            assert os.path.exists(os.path.join(run_tests.ROOT, target)), (name, target)


@pytest.mark.unit
def test_default_and_all_suites_are_known():
    for name in run_tests.DEFAULT_SUITES + run_tests.ALL_SUITES:
        assert name in run_tests.SUITES


@pytest.mark.unit
def test_marker_selection():
    targets = ["tests/unit/"]
    assert run_tests.pytest_command(targets, _args(fast=True))[-3:] == [
        "-m", "not slow", "tests/unit/"
    ]
    assert run_tests.pytest_command(targets, _args(slow=True))[-3:] == [
        "-m", "slow", "tests/unit/"
    ]
    assert "-m" not in run_tests.pytest_command(targets, _args())


@pytest.mark.unit
def test_keyword_verbosity_and_coverage():
    cmd = run_tests.pytest_command(
        ["tests/"], _args(verbose=True, keyword="float16", coverage=True)
    )
    assert "-v" in cmd
    assert cmd[cmd.index("-k") + 1] == "float16"
    assert "--cov=pyrefscale" in cmd
    assert cmd[-1] == "tests/"
