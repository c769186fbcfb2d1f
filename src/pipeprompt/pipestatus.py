from __future__ import annotations
from collections.abc import Iterable
from dataclasses import dataclass
import logging
import signal
from .styles import Painter
from .styles import StyleClass as SC

log = logging.getLogger(__name__)

#: Exit statuses above this value indicate that a process was killed by the
#: signal whose number is the excess
SIGNAL_STATUS_BASE = 128


@dataclass(frozen=True)
class PipeStatus:
    #: The exit statuses of the stages of the most recently executed pipeline,
    #: in pipeline order
    codes: tuple[int, ...] = ()

    #: Whether to show statuses that indicate death-by-signal as the signal's
    #: name (e.g., ``SIGINT``) instead of as a number
    signal_names: bool = False

    @classmethod
    def parse(cls, args: Iterable[str], signal_names: bool = False) -> PipeStatus:
        """
        Construct a `PipeStatus` from a sequence of strings, such as the
        expansion of Bash's ``${PIPESTATUS[@]}``.  Strings that are not
        integers are counted as failures with status 1.
        """
        codes = []
        for a in args:
            try:
                codes.append(int(a))
            except ValueError:
                log.debug("Treating non-integer exit status %r as 1", a)
                codes.append(1)
        return cls(codes=tuple(codes), signal_names=signal_names)

    @property
    def failed(self) -> bool:
        """`True` iff any stage of the pipeline exited with a nonzero status"""
        return any(c != 0 for c in self.codes)

    def describe(self, code: int) -> str:
        if self.signal_names and (name := signal_name(code)) is not None:
            return name
        return str(code)

    def display(self, paint: Painter) -> str:
        # Successful pipelines (and the lack of any pipeline) show nothing:
        if not self.failed:
            return ""
        p = paint("[", SC.STATUS)
        for i, code in enumerate(self.codes):
            if i:
                # Separator between stages:
                p += paint("|", SC.STATUS)
            p += paint(self.describe(code), SC.STATUS_BOLD)
        p += paint("]", SC.STATUS)
        return p


def signal_name(code: int) -> str | None:
    """
    If the exit status ``code`` indicates that a process was killed by a
    signal known to this platform, return the signal's name; otherwise, return
    `None`.
    """
    if code <= SIGNAL_STATUS_BASE:
        return None
    try:
        return signal.Signals(code - SIGNAL_STATUS_BASE).name
    except ValueError:
        return None
