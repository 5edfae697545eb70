# releasemenu - Interactive release selection menu
# Copyright (c) 2024-2026 Matthew Bright
# Licensed under the MIT License. See LICENSE file for details.

"""Interactive update selection menu.

Shows one row per controller error or container update, and lets the user
pick updates with the arrow keys, space to toggle and enter to confirm.
Escape or Ctrl+C aborts without selecting anything.
"""

import logging
from dataclasses import dataclass

from .keys import DEFAULT_TTY, Arrow, KeyKind, read_key
from .result import ContainerUpdate, UpdateStatus
from .writer import HIDE_CURSOR, SHOW_CURSOR, ClearableWriter, TabWriter

logger = logging.getLogger(__name__)

HEADER = "   CONTROLLER \tSTATUS \tUPDATES\n"
CURSOR_GLYPH = ">"
CHECKBOX_SELECTED = "◉"
CHECKBOX_EMPTY = "◯"


@dataclass
class MenuItem:
    """One row of the menu. Only rows carrying an update can be selected."""

    id: str
    status: UpdateStatus
    error: str = ""
    update: ContainerUpdate | None = None
    selected: bool = False

    @property
    def selectable(self) -> bool:
        return self.update is not None

    def checkbox(self) -> str:
        if not self.selectable:
            return " "
        if self.selected:
            return CHECKBOX_SELECTED
        return CHECKBOX_EMPTY

    def updates(self) -> str:
        if self.update is not None:
            return f"{self.update.container}: {self.update.current} -> {self.update.target.tag}"
        return self.error


class Menu:
    """Selection menu over a release Result.

    Verbosity controls which controllers are listed:
        - 2 = include skipped and ignored controllers
        - 1 = include skipped controllers, exclude ignored ones
        - 0 = exclude skipped and ignored controllers
    """

    def __init__(self, stream, results, verbosity=0, key_reader=None, tty=DEFAULT_TTY):
        self._stream = stream
        self.out = ClearableWriter(TabWriter(stream, minwidth=0, padding=2))
        self.results = results
        self.items = []
        self.selectable_indices = []
        self.cursor = 0
        self._key_reader = key_reader or (lambda: read_key(tty))
        self._from_results(results, verbosity)

    @property
    def selectable(self) -> int:
        return len(self.selectable_indices)

    def _from_results(self, results, verbosity):
        for resource_id in results.service_ids():
            result = results[resource_id]
            if result.status == UpdateStatus.IGNORED and verbosity < 2:
                continue
            if result.status == UpdateStatus.SKIPPED and verbosity < 1:
                continue

            if result.error:
                self.add_item(MenuItem(id=resource_id, status=result.status, error=result.error))
            for update in result.per_container:
                self.add_item(MenuItem(id=resource_id, status=result.status, update=update))

    def add_item(self, item: MenuItem):
        if item.selectable:
            self.selectable_indices.append(len(self.items))
        else:
            item.selected = False
        self.items.append(item)

    def cursor_row(self) -> int | None:
        """Index into items of the row under the cursor."""
        if not self.selectable_indices:
            return None
        return self.selectable_indices[self.cursor]

    def toggle_cursor(self):
        row = self.cursor_row()
        if row is None:
            return
        self.items[row].selected = not self.items[row].selected
        self.render()

    def cursor_down(self):
        if not self.selectable:
            return
        self.cursor = (self.cursor + 1) % self.selectable
        self.render()

    def cursor_up(self):
        if not self.selectable:
            return
        self.cursor = (self.cursor + self.selectable - 1) % self.selectable
        self.render()

    def selected_updates(self) -> list[ContainerUpdate]:
        return [item.update for item in self.items if item.selected]

    def run(self):
        """Run the interactive loop until the user confirms or aborts.

        Returns:
            tuple: (list of selected ContainerUpdate, aborted flag)
        """
        try:
            self.render()
            while True:
                try:
                    key = self._key_reader()
                except OSError as error:
                    logger.warning(f"Terminal read failed: {error}")
                    return self._abort()

                if key.kind in (KeyKind.ESCAPE, KeyKind.INTERRUPT):
                    logger.debug(f"Menu aborted by {key.kind.value} key")
                    return self._abort()

                if key.kind == KeyKind.SPACE:
                    self.toggle_cursor()
                elif key.kind == KeyKind.ENTER:
                    selected = self.selected_updates()
                    self._stream.write("\n")
                    logger.debug(f"Menu confirmed with {len(selected)} update(s) selected")
                    return selected, False
                elif key.kind == KeyKind.ARROW and key.arrow == Arrow.DOWN:
                    self.cursor_down()
                elif key.kind == KeyKind.ARROW and key.arrow == Arrow.UP:
                    self.cursor_up()
        finally:
            self._stream.write(SHOW_CURSOR)
            self._stream.flush()

    def _abort(self):
        self.out.write("Aborted.\n")
        self.out.flush()
        return [], True

    def render(self):
        self.out.clear()
        self.out.write(HEADER)
        cursor_row = self.cursor_row()
        for index, item in enumerate(self.items):
            self._render_item(item, index == cursor_row)
        self.out.flush()
        self._stream.write(HIDE_CURSOR)
        self._stream.flush()

    def _render_item(self, item, under_cursor):
        cursor = CURSOR_GLYPH if under_cursor else " "
        self.out.write(f"{cursor}{item.checkbox()} {item.id}\t{item.status}\t{item.updates()}\n")
