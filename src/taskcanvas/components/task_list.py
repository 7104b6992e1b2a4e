"""Task list: a bounded-concurrency task runner that renders its own status.

Async tasks start as soon as they are added, on a worker pool that never
runs more than ``max_concurrent_async`` of them at once. Sync tasks are
queued and run one after another, in the order they were added, once every
async task has finished. The list is displayed in registration order no
matter which task finishes first, and a ticker thread redraws it while
:meth:`TaskList.run` is in progress so elapsed times keep moving.

A task action returns a :class:`TaskState`, or a ``(TaskState, error)``
tuple, or raises. Actions that accept one positional argument receive a
``set_progress(text)`` callback whose latest text is shown while the task
runs. Example::

    TaskList().add_task(
        TaskOptions(title="Uploading", action=upload, async_=True)
    ).add_task(
        TaskOptions(title="Finalizing", action=finalize)
    ).run()
"""

from __future__ import annotations

import enum
import inspect
import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Callable, TextIO, Union

from taskcanvas.canvas import Canvas
from taskcanvas.colors import cyan, green, hi_black, red, yellow
from taskcanvas.errors import DetailedError, TaskError
from taskcanvas.printer import Printer
from taskcanvas.utils import duration_as_text

logger = logging.getLogger(__name__)


class TaskState(enum.IntEnum):
    PENDING = 0
    RUNNING = 1
    SKIPPED = 2
    WARNING = 3
    ERROR = 4
    SUCCESS = 5

    @property
    def terminal(self) -> bool:
        return self not in (TaskState.PENDING, TaskState.RUNNING)


SetProgressFunc = Callable[[str], None]
TaskResult = Union[TaskState, "tuple[TaskState, BaseException | None]"]
TaskAction = Callable[..., TaskResult]


@dataclass
class TaskOptions:
    title: str
    action: TaskAction
    async_: bool = False


@dataclass
class TaskListConfig:
    writer: TextIO | None = None
    max_concurrent_async: int = 5
    # Seconds between background redraws while run() is in progress
    refresh_interval: float = 1.0
    success_style: str = "(✔) Done"
    error_style: str = "(x) Error"
    warning_style: str = "(!) Warning"
    running_style: str = "(-) Running"
    skipped_style: str = "(-) Skipped"
    pending_style: str = "(o) Pending"


@dataclass(eq=False)
class Task:
    """One unit of work.

    Only the thread executing the task writes its fields; everything else
    reads them.
    """

    title: str
    action: TaskAction
    state: TaskState = TaskState.PENDING
    error: BaseException | None = None
    progress: str = ""
    start_time: float | None = None
    end_time: float | None = None

    @property
    def elapsed(self) -> float | None:
        """Seconds spent running so far, or ``None`` before the task starts."""
        if self.start_time is None:
            return None
        end = self.end_time if self.end_time is not None else time.monotonic()
        return end - self.start_time

    def set_progress(self, text: str) -> None:
        self.progress = text


def _accepts_progress(action: TaskAction) -> bool:
    try:
        params = inspect.signature(action).parameters.values()
    except (TypeError, ValueError):
        return False
    required = [
        p
        for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    ]
    return len(required) == 1


def _error_description(error: BaseException) -> str:
    if isinstance(error, DetailedError):
        return error.description
    return str(error)


class TaskList:
    """Runs tasks and renders their status as a visual on a canvas."""

    def __init__(self, config: TaskListConfig | None = None) -> None:
        self._config = config if config is not None else TaskListConfig()
        if self._config.max_concurrent_async < 1:
            raise ValueError("max_concurrent_async must be at least 1")

        self._canvas: Canvas | None = None
        self._all_tasks: list[Task] = []
        self._sync_tasks: list[Task] = []
        self._futures: list[Future[None]] = []
        self._executor: ThreadPoolExecutor | None = None

        self._tasks_lock = threading.Lock()
        self._sync_lock = threading.Lock()
        # Guards the error list and the completion counter, never the canvas
        self._results_lock = threading.Lock()
        self._errors: list[Exception] = []
        self._completed = 0

    @property
    def tasks(self) -> list[Task]:
        """A snapshot of every task in registration order."""
        with self._tasks_lock:
            return list(self._all_tasks)

    def with_canvas(self, canvas: Canvas) -> TaskList:
        self._canvas = canvas
        return self

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_task(self, options: TaskOptions) -> TaskList:
        """Register a task; async tasks are dispatched immediately."""
        task = Task(title=options.title, action=options.action)

        with self._tasks_lock:
            self._all_tasks.append(task)

        if options.async_:
            self._add_async_task(task)
        else:
            with self._sync_lock:
                self._sync_tasks.append(task)

        return self

    def _add_async_task(self, task: Task) -> None:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._config.max_concurrent_async,
                thread_name_prefix="taskcanvas-task",
            )
        self._futures.append(self._executor.submit(self._execute, task))

    # ------------------------------------------------------------------
    # Running
    # ------------------------------------------------------------------

    def completed(self) -> bool:
        """True once every registered task has reached a terminal state."""
        with self._results_lock:
            completed = self._completed
        with self._tasks_lock:
            return completed == len(self._all_tasks)

    def update(self) -> None:
        if self._canvas is None:
            self._canvas = Canvas(self).with_writer(self._config.writer)
        self._canvas.update()

    def run(self) -> None:
        """Run every task to completion and redraw the list while doing so.

        Waits for all async tasks, then runs the queued sync tasks in order.
        Raises an :class:`ExceptionGroup` of every collected task error when
        any task did not finish with ``TaskState.SUCCESS``.
        """
        if self._canvas is None:
            self._canvas = Canvas(self).with_writer(self._config.writer)

        self._canvas.run()

        stop = threading.Event()
        render_errors: list[Exception] = []
        ticker = threading.Thread(
            target=self._tick,
            args=(stop, render_errors),
            name="taskcanvas-redraw",
            daemon=True,
        )
        ticker.start()

        try:
            self._wait_for_async_tasks()
            self._run_sync_tasks()
        finally:
            stop.set()
            ticker.join()

        if render_errors:
            raise render_errors[0]

        self.update()

        with self._results_lock:
            errors = list(self._errors)
        if errors:
            raise ExceptionGroup(
                f"{len(errors)} of {len(self.tasks)} tasks did not succeed", errors
            )

    def _tick(self, stop: threading.Event, render_errors: list[Exception]) -> None:
        while not stop.wait(self._config.refresh_interval):
            if self.completed():
                return
            try:
                self.update()
            except Exception as exc:
                render_errors.append(exc)
                return

    def _wait_for_async_tasks(self) -> None:
        if self._executor is None:
            return
        wait(self._futures)
        futures, self._futures = self._futures, []
        self._executor.shutdown(wait=True)
        self._executor = None
        # Re-raise anything that escaped _execute, e.g. SystemExit
        for future in futures:
            future.result()

    def _run_sync_tasks(self) -> None:
        while True:
            with self._sync_lock:
                if not self._sync_tasks:
                    return
                task = self._sync_tasks.pop(0)
            self._execute(task)

    def _execute(self, task: Task) -> None:
        task.start_time = time.monotonic()
        task.state = TaskState.RUNNING
        logger.debug("task %r started", task.title)

        try:
            state, error = self._call_action(task)
        except Exception as exc:
            logger.exception("task %r raised", task.title)
            state, error = TaskState.ERROR, exc
        except BaseException as exc:
            # SystemExit and friends still end the task before propagating
            logger.error("task %r interrupted by %s", task.title, type(exc).__name__)
            self._finish(task, TaskState.ERROR, exc, None)
            raise

        failure = error
        if failure is None and state is not TaskState.SUCCESS:
            failure = TaskError(task.title, state.name.lower())
        self._finish(task, state, error, failure)

    def _finish(
        self,
        task: Task,
        state: TaskState,
        error: BaseException | None,
        failure: Exception | None,
    ) -> None:
        task.end_time = time.monotonic()
        task.error = error
        task.state = state
        logger.debug(
            "task %r finished as %s after %.3fs", task.title, state.name, task.elapsed or 0.0
        )

        with self._results_lock:
            if failure is not None:
                self._errors.append(failure)
            self._completed += 1

    @staticmethod
    def _call_action(task: Task) -> tuple[TaskState, Exception | None]:
        if _accepts_progress(task.action):
            result = task.action(task.set_progress)
        else:
            result = task.action()

        if isinstance(result, tuple):
            state, error = result
        else:
            state, error = result, None

        if not isinstance(state, TaskState) or not state.terminal:
            raise ValueError(f"task '{task.title}' returned non-terminal state {state!r}")
        if error is not None and not isinstance(error, Exception):
            raise TypeError(f"task '{task.title}' returned a non-exception error {error!r}")
        return state, error

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, printer: Printer) -> None:
        config = self._config
        printer.writeln()

        for task in self.tasks:
            state = task.state
            elapsed = task.elapsed
            elapsed_text = (
                hi_black(f"({duration_as_text(elapsed)})") if elapsed is not None else ""
            )
            error_text = (
                red(f"({_error_description(task.error)})") if task.error is not None else ""
            )

            if state is TaskState.PENDING:
                parts = [hi_black(config.pending_style), task.title]
            elif state is TaskState.RUNNING:
                parts = [cyan(config.running_style), task.title, elapsed_text]
                if task.progress:
                    parts.append(hi_black(task.progress))
            elif state is TaskState.WARNING:
                parts = [yellow(config.warning_style), task.title, elapsed_text]
            elif state is TaskState.ERROR:
                parts = [red(config.error_style), task.title, elapsed_text, error_text]
            elif state is TaskState.SUCCESS:
                parts = [green(config.success_style), task.title, elapsed_text]
            else:
                parts = [hi_black(config.skipped_style), task.title, error_text]

            printer.writeln(" ".join(part for part in parts if part))

        printer.writeln()
