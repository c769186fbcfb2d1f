from __future__ import annotations
import getpass
import logging
import os
import socket

log = logging.getLogger(__name__)


def username() -> str:
    """
    Return the name of the current user, taken from :envvar:`USER` if set,
    else from the password database.  If all lookups fail, the numeric user
    ID (or ``"?"`` on platforms without one) is returned instead.
    """
    if user := os.environ.get("USER"):
        return user
    try:
        return getpass.getuser()
    except (KeyError, OSError) as e:
        log.debug("Could not determine user name: %s", e)
    if hasattr(os, "getuid"):
        return str(os.getuid())
    return "?"


def prompt_hostname() -> str:
    """Return the local hostname up to (but not including) the first period"""
    try:
        hostname = socket.gethostname()
    except OSError as e:
        log.debug("Could not determine hostname: %s", e)
        return "localhost"
    return hostname.split(".")[0]


def current_directory() -> str:
    # Prefer $PWD to os.getcwd() as the former does not resolve symlinks
    if pwd := os.environ.get("PWD"):
        return pwd
    try:
        return os.getcwd()
    except OSError as e:
        # The current directory has been deleted out from under us
        log.debug("Could not determine current directory: %s", e)
        return "?"


def prompt_pwd(path: str, home: str | None = None, dir_length: int = 1) -> str:
    """
    Abbreviate the directory path ``path`` for display in a prompt.  If the
    path is at or under ``home``, that prefix is replaced with ``~``.  Every
    component except the last is then cut down to its first ``dir_length``
    characters (not counting a leading period); a ``dir_length`` of zero or
    less disables this shortening.  Trailing slashes are ignored.

    >>> prompt_pwd("/home/user/projects/pipeprompt", home="/home/user")
    '~/p/pipeprompt'
    """
    path = path.rstrip("/") or path[:1]
    if home and home != "/":
        home = home.rstrip("/")
        if path == home:
            path = "~"
        elif path.startswith(home + "/"):
            path = "~" + path[len(home) :]
    if dir_length <= 0:
        return path
    *parents, last = path.split("/")
    short = [
        p[: dir_length + 1] if p.startswith(".") else p[:dir_length] for p in parents
    ]
    return "/".join([*short, last])


def is_root_user() -> bool:
    """
    Return `True` iff the process is running with an effective user ID of 0.
    Always `False` on platforms that do not have user IDs.
    """
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def never_root() -> bool:
    return False
