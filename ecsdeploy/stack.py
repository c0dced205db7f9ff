"""Interpreting CloudFormation stack events during an operation."""

from __future__ import annotations

import enum
import re


class StackOperation(enum.Enum):
    """The kind of operation being waited on."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class ProgressStatus(enum.Enum):
    """How a resource event is reported to the user."""

    WORKING = "working"
    DONE = "done"
    ERROR = "error"


_COMPLETIONS = {
    "CREATE_COMPLETE": StackOperation.CREATE,
    "UPDATE_COMPLETE": StackOperation.UPDATE,
    "DELETE_COMPLETE": StackOperation.DELETE,
}

_WORD_SEPARATORS = re.compile(r"[_\-.\s]+")


def to_camel_case(status: str) -> str:
    """Turn a status such as ``CREATE_IN_PROGRESS`` into ``CreateInProgress``."""
    words = _WORD_SEPARATORS.split(status.lower())
    return "".join(word[:1].upper() + word[1:] for word in words if word)


def event_progress(status: str, operation: StackOperation) -> ProgressStatus:
    """Classify a resource status reported while running ``operation``."""
    completed = _COMPLETIONS.get(status)
    if completed is not None:
        return ProgressStatus.DONE if completed is operation else ProgressStatus.WORKING
    if status.endswith("_FAILED"):
        return ProgressStatus.ERROR
    return ProgressStatus.WORKING