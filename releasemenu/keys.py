# releasemenu - Interactive release selection menu
# Copyright (c) 2024-2026 Matthew Bright
# Licensed under the MIT License. See LICENSE file for details.

"""Raw keyboard input for the selection menu.

Each read opens the terminal device, switches it to raw mode (no echo, no
line editing), reads a single keystroke of up to three bytes, and restores
the previous mode before returning, whatever happens in between.
"""

import logging
import os
import termios
import tty
from dataclasses import dataclass
from enum import Enum, IntEnum

logger = logging.getLogger(__name__)

DEFAULT_TTY = "/dev/tty"

# Longest sequence we decode: ESC [ <direction>
READ_SIZE = 3

CTRL_C = 0x03
ESC = 0x1B
SPACE = 0x20
CR = 0x0D
LF = 0x0A


class TerminalError(OSError):
    """The terminal device could not be opened, configured or read."""


class KeyKind(Enum):
    CHAR = "char"
    ARROW = "arrow"
    SPACE = "space"
    ENTER = "enter"
    ESCAPE = "escape"
    INTERRUPT = "interrupt"
    UNKNOWN = "unknown"


class Arrow(IntEnum):
    """Arrow keys, numbered with browser keyboard event codes."""

    LEFT = 37
    UP = 38
    RIGHT = 39
    DOWN = 40


# Final byte of ESC [ <byte>
ARROW_SEQUENCES = {
    ord("A"): Arrow.UP,
    ord("B"): Arrow.DOWN,
    ord("C"): Arrow.RIGHT,
    ord("D"): Arrow.LEFT,
}

SINGLE_BYTE_KEYS = {
    CTRL_C: KeyKind.INTERRUPT,
    ESC: KeyKind.ESCAPE,
    SPACE: KeyKind.SPACE,
    CR: KeyKind.ENTER,
    LF: KeyKind.ENTER,
}


@dataclass(frozen=True)
class KeyEvent:
    """A decoded keystroke."""

    kind: KeyKind
    char: int | None = None
    arrow: Arrow | None = None

    @classmethod
    def of_char(cls, byte: int) -> "KeyEvent":
        return cls(kind=SINGLE_BYTE_KEYS.get(byte, KeyKind.CHAR), char=byte)

    @classmethod
    def of_arrow(cls, arrow: Arrow) -> "KeyEvent":
        return cls(kind=KeyKind.ARROW, arrow=arrow)


UNKNOWN_KEY = KeyEvent(kind=KeyKind.UNKNOWN)


def decode_key(data: bytes) -> KeyEvent:
    """Decode the bytes of one raw read into a KeyEvent.

    Args:
        data: Bytes returned by a single read of the terminal

    Returns:
        KeyEvent: ARROW for ``ESC [ A-D``, a single-byte key for one byte,
        UNKNOWN for anything else.
    """
    if len(data) == 3 and data[0] == ESC and data[1] == ord("["):
        arrow = ARROW_SEQUENCES.get(data[2])
        if arrow is None:
            logger.debug(f"Ignoring escape sequence {data!r}")
            return UNKNOWN_KEY
        return KeyEvent.of_arrow(arrow)

    if len(data) == 1:
        return KeyEvent.of_char(data[0])

    logger.debug(f"Ignoring {len(data)}-byte read {data!r}")
    return UNKNOWN_KEY


class RawTerminal:
    """Terminal device held in raw mode for the duration of a with block."""

    def __init__(self, path=DEFAULT_TTY):
        self.path = path
        self._fd = None
        self._old_settings = None

    def __enter__(self):
        try:
            self._fd = os.open(self.path, os.O_RDWR | os.O_NOCTTY)
        except OSError as error:
            raise TerminalError(
                error.errno, f"Cannot open terminal: {error.strerror}", self.path
            ) from error

        try:
            self._old_settings = termios.tcgetattr(self._fd)
            tty.setraw(self._fd)
        except termios.error as error:
            self._restore_and_close()
            raise TerminalError(f"Cannot set raw mode on {self.path}: {error}") from error
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self._restore_and_close()
        return False

    def read(self, size=READ_SIZE) -> bytes:
        try:
            data = os.read(self._fd, size)
        except OSError as error:
            raise TerminalError(
                error.errno, f"Cannot read terminal: {error.strerror}", self.path
            ) from error
        if not data:
            # End of file: the terminal hung up
            raise TerminalError(f"Terminal closed: {self.path}")
        return data

    def _restore_and_close(self):
        try:
            if self._old_settings is not None:
                termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old_settings)
        except termios.error as error:
            raise TerminalError(f"Cannot restore mode on {self.path}: {error}") from error
        finally:
            os.close(self._fd)
            self._fd = None
            self._old_settings = None


def read_key(path=DEFAULT_TTY) -> KeyEvent:
    """Block for one keystroke on the terminal and decode it."""
    with RawTerminal(path) as terminal:
        data = terminal.read()
    return decode_key(data)
