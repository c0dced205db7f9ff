"""Log consumers and filtering by service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class LogConsumer(Protocol):
    """Receives log lines and status messages for containers."""

    def log(self, container: str, service: str, message: str) -> None: ...

    def status(self, container: str, message: str) -> None: ...

    def register(self, name: str) -> None: ...


@dataclass(frozen=True)
class AllowListLogConsumer:
    """Forwards only what concerns names in the allow list."""

    allow_list: frozenset[str]
    delegate: LogConsumer

    def log(self, container: str, service: str, message: str) -> None:
        if service in self.allow_list:
            self.delegate.log(container, service, message)

    def status(self, container: str, message: str) -> None:
        if container in self.allow_list:
            self.delegate.status(container, message)

    def register(self, name: str) -> None:
        if name in self.allow_list:
            self.delegate.register(name)


def filtered_log_consumer(consumer: LogConsumer, services: list[str]) -> LogConsumer:
    """Wrap ``consumer`` so it only sees the given services; no services means no filter."""
    if not services:
        return consumer
    return AllowListLogConsumer(frozenset(services), consumer)