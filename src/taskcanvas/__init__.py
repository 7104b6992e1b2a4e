"""taskcanvas: redraw-in-place terminal output for task lists, spinners and prompts."""

# Canvas and visuals
from taskcanvas.canvas import Canvas, RenderFn, Visual, VisualElement, render

# ANSI colour helpers
from taskcanvas.colors import (
    bold,
    colors_enabled,
    cyan,
    green,
    hi_black,
    hi_magenta,
    hi_red,
    hyperlink,
    red,
    yellow,
)

# Components (re-exported from components package)
from taskcanvas.components import (
    Confirm,
    ConfirmOptions,
    Prompt,
    PromptOptions,
    Select,
    SelectOptions,
    SetProgressFunc,
    Spinner,
    SpinnerOptions,
    Task,
    TaskAction,
    TaskList,
    TaskListConfig,
    TaskOptions,
    TaskState,
    ValidationFn,
)

# Cursor control
from taskcanvas.cursor import Cursor

# Errors
from taskcanvas.errors import Cancelled, DetailedError, TaskError

# Keyboard input
from taskcanvas.input import EventQueue, Input, InputConfig, InputEvent
from taskcanvas.keys import Key, parse_key, split_sequences
from taskcanvas.terminal import KeySource, TerminalKeys

# Printer
from taskcanvas.printer import CanvasSize, CursorPosition, Printer

# Utilities
from taskcanvas.utils import duration_as_text, strip_ansi, visible_width

__all__ = [
    # Canvas
    "Canvas",
    "RenderFn",
    "Visual",
    "VisualElement",
    "render",
    # Colors
    "bold",
    "colors_enabled",
    "cyan",
    "green",
    "hi_black",
    "hi_magenta",
    "hi_red",
    "hyperlink",
    "red",
    "yellow",
    # Components
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
    # Cursor
    "Cursor",
    # Errors
    "Cancelled",
    "DetailedError",
    "TaskError",
    # Input
    "EventQueue",
    "Input",
    "InputConfig",
    "InputEvent",
    "Key",
    "KeySource",
    "TerminalKeys",
    "parse_key",
    "split_sequences",
    # Printer
    "CanvasSize",
    "CursorPosition",
    "Printer",
    # Utilities
    "duration_as_text",
    "strip_ansi",
    "visible_width",
]
