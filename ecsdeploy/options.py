"""Options of deployment commands and checks for unsupported flags."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

RECREATE_DIVERGED = "diverged"


class UnsupportedFlagError(Exception):
    """Raised when command options use flags the backend does not support."""

    def __init__(self, flags: list[tuple[str, str]]) -> None:
        self.flags = list(flags)
        message = "; ".join(
            f'option "{command} --{option}": unsupported flag' for command, option in self.flags
        )
        super().__init__(message)


@dataclass
class DownOptions:
    volumes: bool = False
    images: str = ""
    remove_orphans: bool = False
    timeout: float | None = None


@dataclass
class LogOptions:
    services: list[str] = field(default_factory=list)
    follow: bool = False
    since: str = ""
    tail: str = "all"
    timestamps: bool = False
    until: str = ""


@dataclass
class UpOptions:
    inherit: bool = True
    remove_orphans: bool = False
    quiet_pull: bool = False
    recreate: str = RECREATE_DIVERGED
    recreate_dependencies: str = RECREATE_DIVERGED
    attach_to: list[str] = field(default_factory=list)
    exit_code_from: str = ""
    timeout: float | None = None
    attach: Any = None


@dataclass
class ListOptions:
    all: bool = False


@dataclass
class PsOptions:
    all: bool = False


def check_unsupported(
    errors: list[tuple[str, str]], to_check: Any, expected: Any, command: str, option: str
) -> list[tuple[str, str]]:
    """Return ``errors`` with ``(command, option)`` added if the value is not the expected one."""
    if to_check is None and expected is None:
        return errors
    if type(to_check) is not type(expected) or to_check != expected:
        return [*errors, (command, option)]
    return errors


def _run_checks(command: str, checks: list[tuple[Any, Any, str]]) -> None:
    errors: list[tuple[str, str]] = []
    for to_check, expected, option in checks:
        errors = check_unsupported(errors, to_check, expected, command, option)
    if errors:
        raise UnsupportedFlagError(errors)


def check_down_options(options: DownOptions) -> None:
    """Raise UnsupportedFlagError for flags ``down`` cannot honour."""
    _run_checks(
        "down",
        [
            (options.volumes, False, "volumes"),
            (options.images, "", "images"),
            (options.remove_orphans, False, "remove-orphans"),
            (options.timeout, None, "timeout"),
        ],
    )


def check_log_options(options: LogOptions) -> None:
    """Raise UnsupportedFlagError for flags ``logs`` cannot honour."""
    _run_checks(
        "logs",
        [
            (options.since, "", "since"),
            (options.tail, "all", "tail"),
            (options.timestamps, False, "timestamps"),
            (options.until, "", "until"),
        ],
    )


def check_up_options(options: UpOptions) -> None:
    """Raise UnsupportedFlagError for flags ``up`` cannot honour."""
    _run_checks(
        "up",
        [
            (options.inherit, True, "renew-anon-volumes"),
            (options.remove_orphans, False, "remove-orphans"),
            (options.quiet_pull, False, "quiet-pull"),
            (options.recreate, RECREATE_DIVERGED, "force-recreate"),
            (options.recreate_dependencies, RECREATE_DIVERGED, "always-recreate-deps"),
            (len(options.attach_to), 0, "attach-dependencies"),
            (len(options.exit_code_from), 0, "exit-code-from"),
            (options.timeout, None, "timeout"),
        ],
    )


def check_list_options(options: ListOptions) -> None:
    """Raise UnsupportedFlagError for flags ``ls`` cannot honour."""
    _run_checks("ls", [(options.all, False, "all")])


def check_ps_options(options: PsOptions) -> None:
    """Raise UnsupportedFlagError for flags ``ps`` cannot honour."""
    _run_checks("ps", [(options.all, False, "all")])