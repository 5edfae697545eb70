# releasemenu - Interactive release selection menu
# Copyright (c) 2024-2026 Matthew Bright
# Licensed under the MIT License. See LICENSE file for details.

"""releasemenu - pick container updates from a release result in the terminal."""

__version__ = "1.0.0"

from .keys import (
    Arrow,
    KeyEvent,
    KeyKind,
    RawTerminal,
    TerminalError,
    decode_key,
    read_key,
)
from .menu import Menu, MenuItem
from .result import (
    ContainerUpdate,
    ControllerResult,
    ImageRef,
    Result,
    ResultFormatError,
    UpdateStatus,
    load_result,
)
from .writer import ClearableWriter, TabWriter

__all__ = [
    # Version
    "__version__",
    # Result data
    "ContainerUpdate",
    "ControllerResult",
    "ImageRef",
    "Result",
    "ResultFormatError",
    "UpdateStatus",
    "load_result",
    # Output
    "ClearableWriter",
    "TabWriter",
    # Keyboard
    "Arrow",
    "KeyEvent",
    "KeyKind",
    "RawTerminal",
    "TerminalError",
    "decode_key",
    "read_key",
    # Menu
    "Menu",
    "MenuItem",
]
