"""Fixtures for end-to-end CLI tests.

Provides a test-only `log-demo` command that logs at every level on a project
logger and on a third-party logger, plus a CliRunner and an isolated working
directory per test.
"""

import json
import logging

import click
import pytest
from click.testing import CliRunner

from clientele.entrypoints.cli.main import clientele

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Log one message per level on 'clientele.demo' and 'some.thirdparty'."""
    logger = logging.getLogger("clientele.demo")
    third_party = logging.getLogger("some.thirdparty")
    logger.debug("demo debug message")
    logger.info("demo info message")
    third_party.debug("third-party debug message")
    third_party.info("third-party info message")
    logger.warning("demo warning message")
    logger.error("demo error message")
    logger.critical("demo critical message")
    logger.debug("demo debug message after the warning")


def _unregister(group: click.Group, name: str) -> None:
    """Drop a command from the group and any click-extra help sections."""
    group.commands.pop(name, None)
    for section in [getattr(group, "_default_section", None), *getattr(group, "_sections", [])]:
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Attach `log-demo` to the `clientele` group for one test."""
    clientele.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _unregister(clientele, "log-demo")


@pytest.fixture
def runner():
    """A Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside a fresh temporary working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def history_file(fs):
    """Write a list of event records to ``history.json`` and return its name."""

    def _write(records) -> str:
        with open("history.json", "w", encoding="utf-8") as f:
            json.dump(records, f)
        return "history.json"

    return _write
