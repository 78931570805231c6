"""CLIENTELE CLI entry point.

The ``clientele`` group only sets up logging; the work happens in its
subcommands:

- ``clientele replay`` rebuilds a customer from a JSON event history.

Examples
    $ clientele --version
    $ clientele -v replay history.json --json
    $ CLIENTELE_LOGGER_LEVELS="clientele=DEBUG" clientele replay history.json
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from clientele import __version__
from clientele.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers import hyperlink, parse_log_level
from .replay import replay

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("clientele", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """CLIENTELE command-line interface.

    CLIENTELE keeps customers as event streams: registration, email
    confirmation and email changes are recorded as immutable events, and the
    current state of a customer is whatever replaying those events yields.
    """

EPILOG = "\b\n" + "\n".join(
    [
        click.style("See Also:", fg="blue", bold=True, underline=True),
        "  Event sourcing: "
        + hyperlink("https://martinfowler.com/eaaDev/EventSourcing.html"),
    ]
)


@dataclass(frozen=True)
class LoggingSettings:
    """Logging choices collected from the group's options."""

    # pylint: disable=too-many-instance-attributes

    verbose_count: int = 0
    quiet_count: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path = DEFAULT_LOG_PATH
    flight_recorder: bool = True
    flight_recorder_capacity: int = 2000
    force_flush: bool = False

    @property
    def console_level(self) -> int:
        """WARNING, one level lower per -v and one higher per -q (clamped)."""
        steps = self.quiet_count - self.verbose_count
        return min(logging.CRITICAL, max(logging.DEBUG, logging.WARNING + 10 * steps))

    def handlers(self) -> list["Handler"]:
        """Console handler, plus the flight recorder when enabled."""
        handlers: list[Handler] = [
            config_console_handler(
                level=self.console_level, debug_mode=self.debug, color=self.color
            )
        ]
        if self.flight_recorder:
            handlers.append(
                config_flight_recorder(
                    path=self.log_path,
                    capacity=self.flight_recorder_capacity,
                    flush_on_close=self.force_flush,
                )
            )
        return handlers


def configure_logging(settings: LoggingSettings, logger_levels: dict[str, int]) -> None:
    """Install the handlers on the root logger and apply per-logger levels."""
    handlers = settings.handlers()
    # root passes everything; each handler applies its own level
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in logger_levels.items():
        logging.getLogger(name).setLevel(level)

    log_startup(
        logger,
        app_version=__version__,
        level=settings.console_level,
        handlers=handlers,
        logger_levels=logger_levels,
    )


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Show more on the console: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Show less on the console: -q for ERROR, -qq for CRITICAL only.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Show every record with timestamp, logger name and source location.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="CLIENTELE_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to (truncated on every run).",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="CLIENTELE_FLIGHT_RECORDER_CAPACITY",
    help="Number of records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar="CLIENTELE_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Buffer recent records at DEBUG, whatever -v/-q say, and write them "
        "to --log-path as soon as a WARNING is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    envvar="CLIENTELE_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder's buffer on exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("click_extra=WARNING",),
    envvar="CLIENTELE_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL (e.g. "
        "-L clientele.service_layer=DEBUG). Repeatable; the environment "
        "variable takes a comma or space separated list."
    ),
)
@clickx.pass_context
def clientele(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """CLIENTELE command-line interface."""
    settings = LoggingSettings(
        verbose_count=verbose_count,
        quiet_count=quiet_count,
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_recorder_capacity=flight_recorder_capacity,
        force_flush=force_flush,
    )
    configure_logging(settings, logger_levels)
    ctx.call_on_close(logging.shutdown)


clientele.add_command(replay)
