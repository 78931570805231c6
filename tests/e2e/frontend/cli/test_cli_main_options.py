"""End-to-end tests for the logging options of the top-level `clientele` group.

Each test runs the `log-demo` command under different verbosity flags,
logger-level overrides and flight-recorder settings.
"""

import re
from pathlib import Path

import pytest

from clientele.entrypoints.cli.main import clientele

# pylint: disable=unused-argument

LOG_PATH = "flight_recorder.log"


def assert_matches(pattern: str, text: str) -> None:
    """Fail unless `pattern` is found somewhere in `text`."""
    if not re.search(pattern, text, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in:\n{text}")


def assert_no_match(pattern: str, text: str) -> None:
    """Fail if `pattern` is found anywhere in `text`."""
    if re.search(pattern, text, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' unexpectedly found in:\n{text}")


def read_log(path: str = LOG_PATH) -> str:
    """Return the flight recorder file's content."""
    return Path(path).read_text(encoding="utf-8")


class TestVerbosity:
    """Console verbosity from -v/-q."""

    @staticmethod
    @pytest.mark.parametrize(
        ("flags", "shown", "hidden"),
        [
            ([], "demo warning message", "demo info message"),
            (["-v"], "demo info message", "demo debug message"),
            (["-vv"], "demo debug message", None),
            (["-q"], "demo error message", "demo warning message"),
            (["-qq"], "demo critical message", "demo error message"),
        ],
        ids=["default", "v", "vv", "q", "qq"],
    )
    def test_console_level(registered_log_demo, runner, fs, flags, shown, hidden):
        """Each -v lowers and each -q raises the WARNING default by one level."""
        result = runner.invoke(clientele, [*flags, "log-demo"])

        assert result.exit_code == 0
        assert_matches(shown, result.output)
        if hidden:
            assert_no_match(hidden, result.output)

    @staticmethod
    def test_third_party_records_are_prefixed(registered_log_demo, runner, fs):
        """Records from other libraries carry their top-level package name."""
        result = runner.invoke(clientele, ["-v", "log-demo"])

        assert_matches(r"\[some\] third-party info message", result.output)

    @staticmethod
    @pytest.mark.parametrize(
        ("env", "args"),
        [
            ({}, ["-vv", "-L", "some.thirdparty=INFO"]),
            ({"CLIENTELE_LOGGER_LEVELS": "some.thirdparty=INFO"}, ["-vv"]),
        ],
        ids=["cli-flag", "env-var"],
    )
    def test_logger_level_override(registered_log_demo, runner, fs, env, args):
        """A per-logger level hides that logger's DEBUG lines only."""
        result = runner.invoke(clientele, [*args, "log-demo"], env=env)

        assert result.exit_code == 0
        assert_no_match("third-party debug message", result.output)
        assert_matches("third-party info message", result.output)
        assert_matches("demo debug message", result.output)

    @staticmethod
    def test_invalid_logger_level_is_a_usage_error(runner, fs):
        """A malformed -L value aborts with a usage error."""
        result = runner.invoke(clientele, ["-L", "clientele=LOUD", "replay", "x"])

        assert result.exit_code == 2
        assert_matches("Invalid log level: LOUD", result.output)


class TestDebugMode:
    """Source locations in --debug mode."""

    @staticmethod
    def test_debug_shows_source_location(registered_log_demo, runner, fs):
        """--debug adds file:line to console records."""
        result = runner.invoke(clientele, ["--debug", "log-demo"])

        assert result.exit_code == 0
        assert_matches(r"conftest\.py:\d+", result.output)

    @staticmethod
    def test_no_source_location_by_default(registered_log_demo, runner, fs):
        """Without --debug, records show no file:line."""
        result = runner.invoke(clientele, ["log-demo"])

        assert_no_match(r"conftest\.py:\d+", result.output)


class TestFlightRecorder:
    """The in-memory flight recorder and its log file."""

    @staticmethod
    def test_warning_flushes_buffered_debug(registered_log_demo, runner, fs):
        """A WARNING writes the DEBUG history that led up to it."""
        result = runner.invoke(
            clientele,
            ["--log-path", LOG_PATH, "-L", "some.thirdparty=INFO", "log-demo"],
        )

        assert result.exit_code == 0
        content = read_log()
        assert_matches("demo debug message", content)
        assert_matches("third-party info message", content)
        assert_no_match("third-party debug message", content)
        assert_matches("demo critical message", content)
        assert_no_match("demo debug message after the warning", content)

    @staticmethod
    @pytest.mark.parametrize(
        ("env", "args"),
        [({}, ["--force-flush"]), ({"CLIENTELE_FORCE_FLUSH_FLIGHT_RECORDER": "1"}, [])],
        ids=["cli-flag", "env-var"],
    )
    def test_force_flush_writes_tail(registered_log_demo, runner, fs, env, args):
        """With force-flush, records after the last WARNING are written on exit."""
        result = runner.invoke(
            clientele, ["--log-path", LOG_PATH, *args, "log-demo"], env=env
        )

        assert result.exit_code == 0
        assert_matches("demo debug message after the warning", read_log())

    @staticmethod
    @pytest.mark.parametrize(
        ("env", "args"),
        [({}, ["--no-flight-recorder"]), ({"CLIENTELE_FLIGHT_RECORDER": "0"}, [])],
        ids=["cli-flag", "env-var"],
    )
    def test_can_be_disabled(registered_log_demo, runner, fs, env, args):
        """A disabled recorder never creates the log file."""
        result = runner.invoke(
            clientele, ["--log-path", LOG_PATH, *args, "log-demo"], env=env
        )

        assert result.exit_code == 0
        assert not Path(LOG_PATH).exists()

    @staticmethod
    def test_log_path_from_environment(registered_log_demo, runner, fs):
        """CLIENTELE_LOG_PATH chooses the file."""
        result = runner.invoke(
            clientele, ["log-demo"], env={"CLIENTELE_LOG_PATH": "from_env.log"}
        )

        assert result.exit_code == 0
        assert_matches("demo warning message", read_log("from_env.log"))

    @staticmethod
    def test_file_is_truncated_between_runs(registered_log_demo, runner, fs):
        """Each run starts a fresh log file."""
        runner.invoke(clientele, ["--log-path", LOG_PATH, "log-demo"])
        first = len(read_log().splitlines())
        runner.invoke(clientele, ["--log-path", LOG_PATH, "log-demo"])

        assert len(read_log().splitlines()) == first

    @staticmethod
    def test_startup_diagnostics(registered_log_demo, runner, fs):
        """The recorder captures the startup banner and DEBUG diagnostics."""
        result = runner.invoke(
            clientele, ["--log-path", "startup.log", "--force-flush", "log-demo"]
        )

        assert result.exit_code == 0
        content = read_log("startup.log")
        assert_matches(r"CLIENTELE \d+\.\d+\.\d+", content)
        assert_matches(r"console=WARNING", content)
        assert_matches(r"flight-recorder=ON", content)
        assert_matches(r"Python: \d+\.\d+\.\d+", content)
        assert_matches(r"PID: \d+", content)
        assert_matches(r"Click: \d+\.\d+", content)
        assert_matches(r"Rich: \d+\.\d+\.\d+", content)
        assert_matches(r"Handlers: \['RichHandler', 'FlightRecorder'\]", content)
        assert_matches(
            r"Flight recorder: path=startup\.log, capacity=2000, flush_on_close=True",
            content,
        )
        assert_matches(
            r"Per-logger overrides: \{'click_extra': 'WARNING', 'markdown_it': 'WARNING'\}",
            content,
        )

    @staticmethod
    def test_capacity_from_environment(registered_log_demo, runner, fs):
        """The hidden capacity option can be set from the environment."""
        result = runner.invoke(
            clientele,
            ["--log-path", LOG_PATH, "--force-flush", "log-demo"],
            env={"CLIENTELE_FLIGHT_RECORDER_CAPACITY": "50"},
        )

        assert result.exit_code == 0
        assert_matches(r"capacity=50,", read_log())


class TestGroup:
    """Top-level group behavior."""

    @staticmethod
    def test_version(runner):
        """--version prints the package version."""
        result = runner.invoke(clientele, ["--version"])

        assert result.exit_code == 0
        assert_matches(r"\d+\.\d+\.\d+", result.output)

    @staticmethod
    def test_help_lists_replay(runner):
        """--help describes the group and its commands."""
        result = runner.invoke(clientele, ["--help"])

        assert result.exit_code == 0
        assert_matches("replay", result.output)
        assert_matches("command-line interface", result.output)
