"""
ASCII rendering of a PegSet.

Each peg gets a column 2n-1 characters wide. A disk of size s is drawn as
2s-1 disk characters centered in its column, an empty level as the rod.
"""

from dataclasses import dataclass
from typing import List, Optional

from .pegs import EMPTY, PegSet

PEG_GAP = "   "


@dataclass(frozen=True)
class RenderStyle:
    rod: str = "|"
    disk: str = "="
    border: str = "-"


DEFAULT_STYLE = RenderStyle()


def describe_move(source: str, dest: str) -> str:
    return f"{source} -> {dest}"


def column_width(disk_count: int) -> int:
    return max(1, disk_count * 2 - 1)


def render_slot(size: int, width: int, style: RenderStyle = DEFAULT_STYLE) -> str:
    """One peg column at one level"""
    if size == EMPTY:
        half = (width - 1) // 2
        return " " * half + style.rod + " " * half

    fill = size * 2 - 1
    pad = (width - fill) // 2
    return " " * pad + style.disk * fill + " " * pad


def render(state: PegSet, disk_count: int, move_index: int = 0,
           move_description: str = "", style: Optional[RenderStyle] = None) -> str:
    """
    Draw the pegs as text.

    Args:
        state: Pegs to draw
        disk_count: Total disks in the puzzle; sets the height and column width
        move_index: 0 for the initial state, otherwise the move just made
        move_description: Shown next to the move number, e.g. "A -> C"
        style: Characters for rods, disks and borders

    Returns:
        The diagram, starting with a blank line and ending with a blank line
    """
    style = style or DEFAULT_STYLE
    width = column_width(disk_count)
    border = style.border * (width * 3 + 8)

    lines: List[str] = [""]
    if move_index == 0:
        lines.append("Initial State:")
    else:
        lines.append(f"Move {move_index}: {move_description}")
    lines.append(border)

    for level in range(disk_count, 0, -1):
        row = "".join(
            render_slot(state.disk_at(name, level), width, style) + PEG_GAP
            for name in state.names
        )
        lines.append(row)

    lines.append(border)

    half = " " * ((width - 1) // 2)
    labels = (" " * (width - 1) + PEG_GAP).join(half + name for name in state.names)
    lines.append(labels)

    return "\n".join(lines) + "\n\n"
