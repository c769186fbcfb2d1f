from __future__ import annotations
from collections.abc import Mapping
from dataclasses import InitVar, dataclass, replace
from enum import Enum
import logging
from typing import Protocol

log = logging.getLogger(__name__)


class Color(Enum):
    """
    An enumeration of the supported foreground colors.  Each color's value
    equals its xterm number.
    """

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    LIGHT_BLACK = 8
    LIGHT_RED = 9
    LIGHT_GREEN = 10
    LIGHT_YELLOW = 11
    LIGHT_BLUE = 12
    LIGHT_MAGENTA = 13
    LIGHT_CYAN = 14
    LIGHT_WHITE = 15

    def asfg(self) -> int:
        """
        Return the ANSI SGR parameter for setting the color as the foreground
        color
        """
        c = self.value
        return c + 30 if c < 8 else c + 82

    @classmethod
    def parse(cls, name: str) -> Color | None:
        """
        Look up a color by name.  Names are case-insensitive, ``-`` and ``_``
        are interchangeable, and a ``br`` prefix (as in ``brblue``) means
        ``LIGHT_``.  Returns `None` for unknown names.
        """
        key = name.strip().upper().replace("-", "_")
        if key.startswith("BRIGHT_"):
            key = "LIGHT_" + key[7:]
        elif key.startswith("BR"):
            key = "LIGHT_" + key[2:]
        try:
            return cls[key]
        except KeyError:
            return None


@dataclass(frozen=True)
class Style:
    color: Color | None = None
    bold: bool = False

    def as_params(self) -> list[str]:
        params = []
        if self.color is not None:
            params.append(str(self.color.asfg()))
        if self.bold:
            params.append("1")
        return params

    def bolded(self) -> Style:
        return replace(self, bold=True)

    @classmethod
    def parse(cls, spec: str) -> Style | None:
        """
        Parse a style specification of the form ``COLOR[,bold]`` (e.g.,
        ``red``, ``brblue,bold``, ``bold``, or ``normal``).  Returns `None` if
        any part of the specification is not recognized.
        """
        if not spec.strip():
            return None
        color: Color | None = None
        bold = False
        for word in spec.split(","):
            word = word.strip().lower()
            if word == "bold":
                bold = True
            elif word in ("", "normal"):
                pass
            elif (c := Color.parse(word)) is not None:
                color = c
            else:
                return None
        return cls(color, bold)


class Styler(Protocol):
    def __call__(self, s: str, style: Style) -> str: ...

    def escape(self, s: str) -> str: ...


class BashStyler:
    """Class for escaping & styling strings for use in Bash's PS1 variable"""

    def __call__(self, s: str, style: Style) -> str:
        r"""
        Return the string ``s`` escaped for use in a PS1 variable.  If
        ``style.color`` is non-`None`, the string will be wrapped in the proper
        escape sequences to display it as the given foreground color.  If
        ``style.bold`` is true, the string will be wrapped in the proper escape
        sequences to display it bold.  All escape sequences are wrapped in ``\[
        ... \]`` so that they may be used in a PS1 variable.

        :param str s: the string to stylize
        :param Style style: the color & weight to stylize the string with
        """
        s = self.escape(s)
        if params := style.as_params():
            s = rf"\[\e[{';'.join(params)}m\]{s}\[\e[m\]"
        return s

    def escape(self, s: str) -> str:
        """
        Escape characters in the string ``s`` that have special meaning in a
        PS1 variable.  Bash decodes backslash escapes in PS1 and then performs
        parameter expansion & command substitution on the result (when the
        ``promptvars`` option is on), so backslashes, ``$``, and backticks
        need two levels of escaping.
        """
        # A single "\$" would render as "#" when the effective UID is 0.
        return s.replace("\\", r"\\\\").replace("$", r"\\$").replace("`", r"\\`")


class ANSIStyler:
    """Class for styling strings for display immediately in the terminal"""

    def __call__(self, s: str, style: Style) -> str:
        if params := style.as_params():
            s = f"\x1B[{';'.join(params)}m{s}\x1B[m"
        return s

    def escape(self, s: str) -> str:
        return s


class ZshStyler:
    """Class for escaping & styling strings for use in zsh's PS1 variable"""

    def __call__(self, s: str, style: Style) -> str:
        s = self.escape(s)
        if style.bold:
            s = f"%B{s}%b"
        if style.color is not None:
            s = f"%F{{{style.color.value}}}{s}%f"
        return s

    def escape(self, s: str) -> str:
        return s.replace("%", "%%")


StyleClass = Enum(
    "StyleClass",
    [
        "USER_HOST",
        "CWD",
        "CWD_ROOT",
        "STATUS",
        "STATUS_BOLD",
    ],
)


def parse_style_class(name: str) -> StyleClass | None:
    try:
        return StyleClass[name.strip().upper().replace("-", "_")]
    except KeyError:
        return None


Palette = dict[StyleClass, Style]

DARK_THEME: Palette = {
    StyleClass.USER_HOST: Style(Color.LIGHT_BLUE),
    StyleClass.CWD: Style(Color.GREEN),
    StyleClass.STATUS: Style(Color.RED),
    StyleClass.STATUS_BOLD: Style(Color.RED, bold=True),
}

LIGHT_THEME: Palette = DARK_THEME | {
    StyleClass.CWD: Style(Color.BLUE),
}

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}


def resolve_palette(
    theme: Mapping[StyleClass, Style],
    overrides: Mapping[StyleClass, Style] | None = None,
) -> Palette:
    """
    Combine a theme with per-role overrides and fill in every role the result
    is missing, so that the returned palette has a style for each
    `StyleClass`.

    - An unconfigured ``CWD_ROOT`` uses the ``CWD`` style.
    - An unconfigured ``STATUS_BOLD`` is the bold variant of ``STATUS``; this
      also applies when only ``STATUS`` is overridden.
    - Any other unconfigured role uses the style from `DARK_THEME`.
    """
    overrides = dict(overrides or {})
    palette = dict(theme) | overrides
    if StyleClass.STATUS in overrides and StyleClass.STATUS_BOLD not in overrides:
        palette.pop(StyleClass.STATUS_BOLD, None)
    for klass in (StyleClass.USER_HOST, StyleClass.CWD, StyleClass.STATUS):
        if klass not in palette:
            log.debug("No style configured for %s; using default", klass.name)
            palette[klass] = DARK_THEME[klass]
    if StyleClass.CWD_ROOT not in palette:
        palette[StyleClass.CWD_ROOT] = palette[StyleClass.CWD]
    if StyleClass.STATUS_BOLD not in palette:
        palette[StyleClass.STATUS_BOLD] = palette[StyleClass.STATUS].bolded()
    return palette


@dataclass
class Painter:
    """
    Styles strings by role.  ``palette`` may be partial (e.g., a bare theme);
    it is combined with ``overrides`` and completed by `resolve_palette()` on
    construction.
    """

    styler: Styler
    palette: Palette
    overrides: InitVar[Mapping[StyleClass, Style] | None] = None

    def __post_init__(self, overrides: Mapping[StyleClass, Style] | None) -> None:
        self.palette = resolve_palette(self.palette, overrides)

    def __call__(self, s: str, klass: StyleClass) -> str:
        return self.styler(s, self.palette[klass])

    def plain(self, s: str) -> str:
        """Escape ``s`` for the target shell without styling it"""
        return self.styler.escape(s)
