import logging
import os
import shutil
from typing import Sequence

import click

from launchkit import __version__ as about
from launchkit.cli.config import setup_logging
from launchkit.cli.exit_codes import INTERNAL_ERROR, LOCAL_ENVIRONMENTAL_ERROR
from launchkit.cli.presenter import CliPresenter
from launchkit.cli.startup import ParsedCommandLine, parse_startup_options
from launchkit.config import LauncherSettings, load_settings
from launchkit.diagnostics import fail, fail_with_errno, fatal_boundary
from launchkit.domain.status import LauncherStatus
from launchkit.errors import LaunchkitError
from launchkit.host.files import read_file, write_file
from launchkit.host.identity import current_user_name
from launchkit.host.paths import make_absolute, make_directories
from launchkit.host.process import execute_in_place, re_execute_self
from launchkit.host.terminal import is_interactive_terminal, terminal_width
from launchkit.utils import decode_argv, encode_argv

# Get a logger for this module.
log = logging.getLogger(__name__)

LAST_COMMAND_FILE = "last_command"
DELEGATED_ENV = "LAUNCHKIT_DELEGATED"
COMMAND_PORT_ENV = "LAUNCHKIT_COMMAND_PORT"
RAW_ARGS_KEY = "launchkit.raw_args"

EPILOG = f"""
Examples:

{click.style('• show user, output base and terminal facts', fg="green")}

    $ launchkit

{click.style('• run a program with a fixed output base and command port', fg="green")}

    $ launchkit --output_base=/tmp/lk --command_port=8080 -- python3 -V
"""


def default_output_base(user: str) -> str:
    """Return the per-user output base used when none is configured."""
    return os.path.join(os.path.expanduser("~"), ".cache", about.__title__, user)


def _hand_off_to_delegate(settings: LauncherSettings, args: Sequence[str]) -> None:
    """Re-run the command line with the configured delegate binary, once."""
    if settings.delegate is None or settings.delegated:
        return
    log.info("Handing off to %s", settings.delegate)
    os.environ[DELEGATED_ENV] = "1"
    try:
        re_execute_self(settings.delegate, [about.__title__, *args])
    except OSError as exc:
        fail_with_errno(
            LOCAL_ENVIRONMENTAL_ERROR,
            f"could not execute delegate '{settings.delegate}'",
            exc,
        )


def _prepare_output_base(parsed: ParsedCommandLine, settings: LauncherSettings, user: str) -> str:
    output_base = make_absolute(
        parsed.options.output_base or settings.output_base or default_output_base(user)
    )
    outcome = make_directories(output_base, settings.directory_mode)
    if not outcome:
        fail_with_errno(
            LOCAL_ENVIRONMENTAL_ERROR,
            f"could not create output base directory '{output_base}'",
            outcome.error,
        )
    return output_base


def show_status(parsed: ParsedCommandLine, user: str, output_base: str) -> None:
    """Print what the launcher knows about its host."""
    interactive = is_interactive_terminal() and not parsed.options.batch
    recorded = read_file(os.path.join(output_base, LAST_COMMAND_FILE))
    status = LauncherStatus(
        user=user,
        output_base=output_base,
        interactive=interactive,
        terminal_columns=terminal_width(),
        command_port=parsed.options.command_port,
        last_command=tuple(decode_argv(recorded)) if recorded is not None else None,
    )
    presenter = CliPresenter(
        json_output=parsed.options.json_output,
        color=interactive and not parsed.options.json_output,
    )
    presenter.emit_status(status)


def launch(parsed: ParsedCommandLine, output_base: str) -> None:
    """Record the command line and replace this process with it."""
    program = parsed.command[0]
    executable = shutil.which(program)
    if executable is None:
        fail(LOCAL_ENVIRONMENTAL_ERROR, f"Cannot find executable '{program}'.")

    record_path = os.path.join(output_base, LAST_COMMAND_FILE)
    outcome = write_file(encode_argv(parsed.command), record_path)
    if not outcome:
        log.warning("Could not record command in %s: %s", record_path, outcome.error)

    if parsed.options.command_port is not None:
        os.environ[COMMAND_PORT_ENV] = str(parsed.options.command_port)

    try:
        execute_in_place(executable, parsed.command)
    except OSError as exc:
        fail_with_errno(LOCAL_ENVIRONMENTAL_ERROR, f"execv of '{executable}' failed", exc)


def run(args: Sequence[str]) -> None:
    """
    Run one launcher invocation over the raw tokens after the program name.

    Raises:
        FatalError: When the launch cannot proceed.
    """
    try:
        settings = load_settings()
    except ValueError as exc:
        fail(LOCAL_ENVIRONMENTAL_ERROR, str(exc))
    setup_logging(settings.log_level)

    _hand_off_to_delegate(settings, args)

    parsed = parse_startup_options(args)
    user = current_user_name()
    output_base = _prepare_output_base(parsed, settings, user)
    log.debug("Using output base %s", output_base)

    if not parsed.command:
        show_status(parsed, user, output_base)
        return
    launch(parsed, output_base)


class RawArgsCommand(click.Command):
    """Command that keeps the unparsed tokens, ``--`` included, in ``ctx.meta``."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_ARGS_KEY] = tuple(args)
        return super().parse_args(ctx, args)


@click.command(
    cls=RawArgsCommand,
    help=about.__description__,
    epilog=EPILOG,
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": ["-h", "--help"],
    },
)
@click.version_option(
    about.__version__,
    prog_name=about.__title__,
    message="%(prog)s, version %(version)s\nCheck {url} for more info".format(url=about.__url__),
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx: click.Context, args: tuple[str, ...]):
    """
    Entry point of the launcher.

    Startup options are parsed from the raw tokens; the first token that is not
    a startup option starts the command that replaces this process.

    Parameters:
        ctx (click.Context): Click context holding the unparsed tokens.
        args (tuple[str, ...]): Tokens left after Click's own parsing.
    """
    with fatal_boundary():
        try:
            run(ctx.meta.get(RAW_ARGS_KEY, args))
        except LaunchkitError:
            raise
        except Exception:
            log.exception("Launcher failed unexpectedly")
            fail(INTERNAL_ERROR, "Internal launcher error.")


if __name__ == "__main__":
    main(prog_name=about.__title__)
