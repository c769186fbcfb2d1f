from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, time
import os
from .pipestatus import PipeStatus
from .styles import Painter
from .styles import StyleClass as SC
from .util import current_directory, never_root, prompt_hostname, prompt_pwd, username


@dataclass(frozen=True)
class PromptInfo:
    #: The name of the current user
    user: str

    #: The local hostname, up to the first period
    hostname: str

    #: The path to the current working directory, as reported by the shell
    cwd: str

    #: The abbreviated form of `cwd` shown in superuser prompts: the home
    #: directory is replaced with ``~`` and all components but the last are
    #: shortened to one character
    pretty_cwd: str

    #: `True` iff the prompt is for a superuser
    superuser: bool

    #: The time at which the prompt is being rendered
    timestamp: time

    #: The exit statuses of the previous pipeline
    pipestatus: PipeStatus

    @classmethod
    def get(
        cls,
        pipestatus: PipeStatus | None = None,
        is_superuser: Callable[[], bool] = never_root,
        now: datetime | None = None,
    ) -> PromptInfo:
        cwd = current_directory()
        return cls(
            user=username(),
            hostname=prompt_hostname(),
            cwd=cwd,
            pretty_cwd=prompt_pwd(cwd, home=os.environ.get("HOME")),
            superuser=is_superuser(),
            timestamp=(now or datetime.now()).time(),
            pipestatus=pipestatus if pipestatus is not None else PipeStatus(),
        )

    def display(self, paint: Painter) -> str:
        """
        Construct & return a complete prompt string for the current environment
        """
        if self.superuser:
            # Short prompt for root: no time, no status, and a "#" at the end
            ps1 = paint.plain(f"{self.user}@{self.hostname} ")
            ps1 += paint(self.pretty_cwd, SC.CWD_ROOT)
            ps1 += "# "
            return ps1

        # Show the current time:
        ps1 = f"[{self.timestamp:%H:%M:%S}] "

        # Show who & where we are:
        ps1 += paint(f"{self.user}@{self.hostname}", SC.USER_HOST)
        ps1 += " "

        # Show the path to the current working directory:
        ps1 += paint(self.cwd, SC.CWD)

        # Show the exit statuses of the last pipeline, if any stage failed:
        ps1 += self.pipestatus.display(paint)

        # The actual prompt symbol goes on its own line:
        ps1 += " \n> "

        return ps1
