"""Tests for running the package as a module."""

import runpy
import sys
from unittest.mock import patch

import pytest


@pytest.mark.cli
@pytest.mark.unit
def test_module_runs_cli(capsys):
    with patch.object(sys, "argv", ["notion2md", "--version"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("notion2md", run_name="__main__")
    assert exc_info.value.code == 0
    assert "notion2md 0.1.0" in capsys.readouterr().out
