from __future__ import annotations
import os
import pytest
from pipeprompt.util import (
    current_directory,
    is_root_user,
    never_root,
    prompt_hostname,
    prompt_pwd,
    username,
)


@pytest.mark.parametrize(
    "path,home,short",
    [
        ("/", None, "/"),
        ("/", "/home/alice", "/"),
        ("/usr", "/", "/usr"),
        ("/usr/local/bin", "/home/alice", "/u/l/bin"),
        ("/home/alice", "/home/alice", "~"),
        ("/home/alice", "/home/alice/", "~"),
        ("/home/alice/", "/home/alice", "~"),
        ("/home/alice/work/", "/home/alice", "~/work"),
        ("/usr/local/bin//", None, "/u/l/bin"),
        ("//", None, "/"),
        ("/home/alice/work", "/home/alice", "~/work"),
        ("/home/alice/projects/pipeprompt", "/home/alice", "~/p/pipeprompt"),
        ("/home/alice/.config/fish", "/home/alice", "~/.c/fish"),
        ("/home/alicex/foo", "/home/alice", "/h/a/foo"),
        ("/var/atlassian/application-data", None, "/v/a/application-data"),
    ],
)
def test_prompt_pwd(path: str, home: str | None, short: str) -> None:
    assert prompt_pwd(path, home=home) == short


@pytest.mark.parametrize(
    "dir_length,short",
    [
        (0, "~/projects/.local/pipeprompt"),
        (-1, "~/projects/.local/pipeprompt"),
        (1, "~/p/.l/pipeprompt"),
        (3, "~/pro/.loc/pipeprompt"),
    ],
)
def test_prompt_pwd_dir_length(dir_length: int, short: str) -> None:
    assert (
        prompt_pwd(
            "/home/alice/projects/.local/pipeprompt",
            home="/home/alice",
            dir_length=dir_length,
        )
        == short
    )


def test_username_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USER", "alice")
    assert username() == "alice"


def test_username_from_getpass(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("USER", raising=False)
    monkeypatch.setattr("getpass.getuser", lambda: "bob")
    assert username() == "bob"


@pytest.mark.skipif(not hasattr(os, "getuid"), reason="Platform has no user IDs")
def test_username_fallback_to_uid(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail() -> str:
        raise OSError("No username set in the environment")

    monkeypatch.delenv("USER", raising=False)
    monkeypatch.setattr("getpass.getuser", fail)
    monkeypatch.setattr("os.getuid", lambda: 1234)
    assert username() == "1234"


@pytest.mark.parametrize(
    "hostname,short",
    [
        ("firefly", "firefly"),
        ("firefly.example.com", "firefly"),
        ("localhost.localdomain", "localhost"),
    ],
)
def test_prompt_hostname(
    monkeypatch: pytest.MonkeyPatch, hostname: str, short: str
) -> None:
    monkeypatch.setattr("socket.gethostname", lambda: hostname)
    assert prompt_hostname() == short


def test_prompt_hostname_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail() -> str:
        raise OSError("gethostname failed")

    monkeypatch.setattr("socket.gethostname", fail)
    assert prompt_hostname() == "localhost"


def test_current_directory_prefers_pwd(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PWD", "/home/alice/link")
    monkeypatch.setattr("os.getcwd", lambda: "/home/alice/target")
    assert current_directory() == "/home/alice/link"


def test_current_directory_getcwd(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PWD", raising=False)
    monkeypatch.setattr("os.getcwd", lambda: "/home/alice/target")
    assert current_directory() == "/home/alice/target"


def test_current_directory_deleted(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail() -> str:
        raise FileNotFoundError("No such file or directory")

    monkeypatch.delenv("PWD", raising=False)
    monkeypatch.setattr("os.getcwd", fail)
    assert current_directory() == "?"


@pytest.mark.parametrize("euid,root", [(0, True), (1000, False)])
def test_is_root_user(monkeypatch: pytest.MonkeyPatch, euid: int, root: bool) -> None:
    monkeypatch.setattr(os, "geteuid", lambda: euid, raising=False)
    assert is_root_user() is root


def test_is_root_user_no_geteuid(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delattr(os, "geteuid", raising=False)
    assert is_root_user() is False


def test_never_root() -> None:
    assert never_root() is False
