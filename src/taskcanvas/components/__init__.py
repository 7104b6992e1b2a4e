"""Ready-made visuals: spinner, prompts and the task list."""

from taskcanvas.components.confirm import Confirm, ConfirmOptions
from taskcanvas.components.prompt import Prompt, PromptOptions, ValidationFn
from taskcanvas.components.selector import Select, SelectOptions
from taskcanvas.components.spinner import Spinner, SpinnerOptions
from taskcanvas.components.task_list import (
    SetProgressFunc,
    Task,
    TaskAction,
    TaskList,
    TaskListConfig,
    TaskOptions,
    TaskState,
)

__all__ = [
    "Confirm",
    "ConfirmOptions",
    "Prompt",
    "PromptOptions",
    "Select",
    "SelectOptions",
    "SetProgressFunc",
    "Spinner",
    "SpinnerOptions",
    "Task",
    "TaskAction",
    "TaskList",
    "TaskListConfig",
    "TaskOptions",
    "TaskState",
    "ValidationFn",
]
