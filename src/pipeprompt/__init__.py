"""
Timestamped shell prompt with pipeline exit statuses

``pipeprompt`` is a program for customizing the command prompt in Bash and
zsh.  It shows the time, the current user & host, the current directory, and
the exit statuses of the previous pipeline, but only when something in that
pipeline failed.

Features:

- Shows every stage's exit status (e.g., ``[0|1]``) after a failed pipeline
  and nothing after a successful one
- Optionally shows statuses from processes killed by signals as signal names
- Switches to a short ``user@host ~/s/dir# `` prompt when running as root
- Dark & light color themes, with per-role color overrides
- Supports both Bash and zsh
"""

__version__ = "0.1.0"
__license__ = "MIT"
