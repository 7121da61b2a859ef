#!/usr/bin/env python3
"""
Pytest configuration and shared fixtures for toast tests.

No test spawns a real subprocess: environment discovery is exercised
through FakeRunner, which replays canned CommandOutput values.
"""

import json
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Union

import pytest

from toast.core.commands import CommandOutput

# =============================================================================
# Fakes
# =============================================================================


class FakeRunner:
    """
    Stand-in for toast.core.commands.run_command.

    responses maps an executable name to either a CommandOutput or an
    exception instance to raise.
    """

    def __init__(self, responses: Dict[str, Union[CommandOutput, BaseException]]):
        self.responses = responses
        self.calls: List[Tuple[str, Tuple[str, ...]]] = []

    def __call__(self, name: str, args: Sequence[str]) -> CommandOutput:
        self.calls.append((name, tuple(args)))
        response = self.responses[name]
        if isinstance(response, BaseException):
            raise response
        return response


def output(text: Union[str, bytes], returncode: int = 0) -> CommandOutput:
    """Build a CommandOutput from text or raw bytes."""
    stdout = text.encode("utf-8") if isinstance(text, str) else text
    return CommandOutput(stdout=stdout, returncode=returncode)


# =============================================================================
# Shared Fixtures
# =============================================================================

IMPORT_MAP = {
    "imports": {
        "react": "./react.js",
        "react-dom": "./react-dom.js",
    }
}


@pytest.fixture
def healthy_runner():
    """node 14.17.0 and an npm bin directory."""
    return FakeRunner(
        {
            "node": output("v14.17.0\n"),
            "npm": output("/proj/node_modules/.bin\n"),
        }
    )


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """A project with a valid public/web_modules/import-map.json."""
    web_modules = tmp_path / "public" / "web_modules"
    web_modules.mkdir(parents=True)
    (web_modules / "import-map.json").write_text(json.dumps(IMPORT_MAP), encoding="utf-8")
    return tmp_path
