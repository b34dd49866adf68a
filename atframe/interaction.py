"""Mouse interaction state for UI items, directory trees and label helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

_C_WHITESPACE = frozenset(" \t\n\v\f\r")


class MouseButton(IntEnum):
    """Mouse buttons, numbered as the UI toolkit numbers them."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2

    @property
    def offset(self) -> int:
        """Distance from the left-button interaction values to this button's."""
        return {MouseButton.LEFT: 0, MouseButton.RIGHT: 4, MouseButton.MIDDLE: 8}[self]


class MouseInteraction(IntEnum):
    """How the mouse currently interacts with an item or window.

    The left, right and middle groups must keep their order: each button's
    values sit at a fixed offset from the left-button values.
    """

    NONE = 0
    HOVERED = 1
    LEFT_CLICKED = 2
    LEFT_DOUBLE_CLICKED = 3
    LEFT_PRESSED = 4
    LEFT_RELEASED = 5
    RIGHT_CLICKED = 6
    RIGHT_DOUBLE_CLICKED = 7
    RIGHT_PRESSED = 8
    RIGHT_RELEASED = 9
    MIDDLE_CLICKED = 10
    MIDDLE_DOUBLE_CLICKED = 11
    MIDDLE_PRESSED = 12
    MIDDLE_RELEASED = 13
    DRAGGED = 14
    FOCUSED = 15
    ACTIVE = 16
    DEACTIVATED = 17
    DEACTIVATED_AFTER_EDIT = 18


@dataclass(frozen=True)
class ButtonInput:
    """What one mouse button did during the current frame."""

    double_clicked: bool = False
    clicked: bool = False
    dragging: bool = False
    down: bool = False
    released: bool = False


# Least important first, so the left button has the final say.
_BUTTON_ORDER = (MouseButton.MIDDLE, MouseButton.RIGHT, MouseButton.LEFT)


@dataclass
class InteractionTracker:
    """Resolves per-frame mouse input into one interaction state.

    Keeps track of which buttons were held down, so that a release is only
    reported for a button that was previously pressed over the item.
    """

    _held: dict[MouseButton, bool] = field(
        default_factory=lambda: {button: False for button in MouseButton}
    )

    def is_held(self, button: MouseButton) -> bool:
        return self._held[MouseButton(button)]

    def _apply_button(
        self, button: MouseButton, press: ButtonInput, state: MouseInteraction
    ) -> MouseInteraction:
        offset = button.offset
        if press.double_clicked:
            return MouseInteraction(MouseInteraction.LEFT_DOUBLE_CLICKED + offset)
        if press.clicked:
            return MouseInteraction(MouseInteraction.LEFT_CLICKED + offset)
        if press.dragging:
            return MouseInteraction.DRAGGED
        if press.down:
            self._held[button] = True
            return MouseInteraction(MouseInteraction.LEFT_PRESSED + offset)
        if press.released and self._held[button]:
            self._held[button] = False
            return MouseInteraction(MouseInteraction.LEFT_RELEASED + offset)
        return state

    def resolve(
        self,
        hovering: bool,
        focused: bool = False,
        active: bool = False,
        deactivated: bool = False,
        deactivated_after_edit: bool = False,
        buttons: Mapping[MouseButton, ButtonInput] | None = None,
        block_input: bool = False,
    ) -> MouseInteraction:
        """The interaction state for this frame.

        ``block_input`` (for example while a modal popup is open) and a mouse
        that is not over the item both yield NONE.
        """
        if block_input or not hovering:
            return MouseInteraction.NONE

        state = MouseInteraction.HOVERED
        if focused:
            state = MouseInteraction.FOCUSED
        if active:
            state = MouseInteraction.ACTIVE
        if deactivated:
            state = MouseInteraction.DEACTIVATED
        if deactivated_after_edit:
            state = MouseInteraction.DEACTIVATED_AFTER_EDIT

        inputs = buttons or {}
        for button in _BUTTON_ORDER:
            state = self._apply_button(button, inputs.get(button, ButtonInput()), state)
        return state


@dataclass(frozen=True)
class DirectoryNode:
    """A file or directory shown in a tree; directories list their children."""

    path: Path
    name: str
    is_dir: bool
    children: tuple[DirectoryNode, ...] = ()


def directory_tree(path: str | Path, extension: str = "") -> DirectoryNode | None:
    """Build a tree of ``path`` with entries sorted by name.

    When ``extension`` is given (for example ``".glsl"``) only files with that
    suffix are kept; a file that does not match yields None. Directories are
    always kept, even if nothing inside them matches.
    """
    path = Path(path)
    if not path.is_dir():
        if extension and path.suffix != extension:
            return None
        return DirectoryNode(path, path.name, False)

    entries = sorted(path.iterdir(), key=lambda entry: entry.name)
    children = tuple(
        node
        for node in (directory_tree(entry, extension) for entry in entries)
        if node is not None
    )
    return DirectoryNode(path, path.name or str(path), True, children)


def strip_label(label: str) -> str:
    """A hidden widget id: ``##`` followed by the label without whitespace."""
    return "##" + "".join(char for char in label if char not in _C_WHITESPACE)