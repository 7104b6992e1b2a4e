"""Exception types shared by the prompts and the task list."""

from __future__ import annotations


class Cancelled(Exception):
    """The user cancelled an interaction (Ctrl+C) or declined to proceed.

    Prompts raise it from ``ask()``. Task actions return it alongside
    ``TaskState.SKIPPED`` when a step is intentionally not executed, so
    callers can separate it from real failures with
    ``ExceptionGroup.split(Cancelled)``.
    """

    def __init__(self, message: str = "cancelled by user") -> None:
        super().__init__(message)


class DetailedError(Exception):
    """An error carrying a short human-readable description.

    The task list shows :attr:`description` inline next to a failed task and
    keeps the wrapped cause for the aggregated error.
    """

    def __init__(self, description: str, cause: BaseException | None = None) -> None:
        super().__init__(description)
        self.description = description
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.description
        return f"{self.description}: {self.cause}"


class TaskError(Exception):
    """A task finished in a non-success state without reporting an error."""

    def __init__(self, title: str, state: str) -> None:
        super().__init__(f"task '{title}' finished with state {state}")
        self.title = title
        self.state = state
