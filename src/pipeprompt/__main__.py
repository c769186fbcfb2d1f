from __future__ import annotations
import argparse
from collections.abc import Iterable, Mapping
import logging
import os
from . import __version__
from .info import PromptInfo
from .pipestatus import PipeStatus
from .styles import (
    THEMES,
    ANSIStyler,
    BashStyler,
    Painter,
    Style,
    StyleClass,
    ZshStyler,
    parse_style_class,
)
from .util import is_root_user, never_root

log = logging.getLogger(__name__)

#: Prefix of the environment variables that set default role colors, e.g.
#: :envvar:`PIPEPROMPT_COLOR_CWD`
COLOR_ENV_PREFIX = "PIPEPROMPT_COLOR_"

#: Environment variable that sets the default theme
THEME_ENV = "PIPEPROMPT_THEME"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description=(
            "Print a timestamped bash/zsh prompt that shows the exit statuses"
            " of the previous pipeline"
        )
    )
    parser.add_argument(
        "--ansi",
        action="store_const",
        dest="stylecls",
        const=ANSIStyler,
        help="Format prompt for direct display",
    )
    parser.add_argument(
        "--bash",
        action="store_const",
        dest="stylecls",
        const=BashStyler,
        help="Format prompt for Bash's PS1 (default)",
    )
    parser.add_argument(
        "-c",
        "--color",
        action="append",
        default=[],
        metavar="ROLE=STYLE",
        help=(
            "Set the style for a part of the prompt, e.g. `cwd=brcyan` or"
            " `status=red,bold`.  May be given multiple times."
        ),
    )
    parser.add_argument(
        "-l",
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        type=str.upper,
        help="Set logging level on stderr  [default: WARNING]",
    )
    parser.add_argument(
        "--no-root-check",
        action="store_true",
        help="Always use the normal-user prompt, even when running as root",
    )
    parser.add_argument(
        "--signal-names",
        action="store_true",
        help="Show statuses of processes killed by signals as signal names",
    )
    parser.add_argument(
        "-T",
        "--theme",
        choices=list(THEMES.keys()),
        default=None,
        help=f"Select the color theme to use  [default: ${THEME_ENV} or dark]",
    )
    parser.add_argument(
        "--zsh",
        action="store_const",
        dest="stylecls",
        const=ZshStyler,
        help="Format prompt for zsh's PS1",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "statuses",
        nargs="*",
        metavar="STATUS",
        help="Exit statuses of the stages of the previous pipeline",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        format="%(levelname)s %(message)s",
        level=getattr(logging, args.log_level),
    )
    theme_name = args.theme or os.environ.get(THEME_ENV) or "dark"
    if (theme := THEMES.get(theme_name)) is None:
        log.info("Unknown theme %r; using dark theme", theme_name)
        theme = THEMES["dark"]
    overrides = env_overrides(os.environ)
    overrides.update(parse_overrides(args.color))
    styler = (args.stylecls or BashStyler)()
    paint = Painter(styler=styler, palette=theme, overrides=overrides)
    info = PromptInfo.get(
        pipestatus=PipeStatus.parse(args.statuses, signal_names=args.signal_names),
        is_superuser=never_root if args.no_root_check else is_root_user,
    )
    print(info.display(paint), end="")


def parse_overrides(specs: Iterable[str]) -> dict[StyleClass, Style]:
    """
    Parse ``ROLE=STYLE`` strings into a mapping of palette overrides.  Entries
    with unknown roles or unparsable styles are logged and skipped.
    """
    overrides: dict[StyleClass, Style] = {}
    for spec in specs:
        role, eq, value = spec.partition("=")
        if not eq:
            log.info("Ignoring color option without '=': %r", spec)
            continue
        add_override(overrides, role, value)
    return overrides


def env_overrides(environ: Mapping[str, str]) -> dict[StyleClass, Style]:
    """
    Collect palette overrides from :envvar:`PIPEPROMPT_COLOR_{ROLE}`
    environment variables.  Empty variables count as unset.
    """
    overrides: dict[StyleClass, Style] = {}
    for key, value in environ.items():
        if key.startswith(COLOR_ENV_PREFIX) and value.strip():
            add_override(overrides, key[len(COLOR_ENV_PREFIX) :], value)
    return overrides


def add_override(overrides: dict[StyleClass, Style], role: str, value: str) -> None:
    if (klass := parse_style_class(role)) is None:
        log.info("Ignoring color for unknown role %r", role)
    elif (style := Style.parse(value)) is None:
        log.info("Ignoring unrecognized style %r for %s", value, klass.name)
    else:
        overrides[klass] = style


if __name__ == "__main__":
    main()
