"""
Recursive Towers of Hanoi move generator.

The solver only decides the order of moves. Whatever the moves should do
(update a PegSet, draw it, wait) happens in the on_move callback, which is
called exactly once per move in the order the moves are made.
"""

import logging
from typing import Callable, List

from .pegs import Move

logger = logging.getLogger(__name__)

# on_move(source_peg, dest_peg, move_index); move_index starts at 1
MoveCallback = Callable[[str, str, int], None]


def optimal_move_count(num_disks: int) -> int:
    """2^n - 1, the minimum number of moves for n disks"""
    return max(0, 2 ** num_disks - 1)


def solve(disk_count: int, source: str, auxiliary: str, destination: str,
          on_move: MoveCallback) -> int:
    """
    Move disk_count disks from source to destination, using auxiliary as the spare.

    Args:
        disk_count: Number of disks to move, >= 0
        source: Name of the peg the disks start on
        auxiliary: Name of the spare peg
        destination: Name of the target peg
        on_move: Called as on_move(source, destination, move_index) for every move

    Returns:
        The number of moves made, always 2^disk_count - 1
    """
    if disk_count < 0:
        raise ValueError(f"disk_count must be >= 0, got {disk_count}")
    if len({source, auxiliary, destination}) != 3:
        raise ValueError(
            f"Peg names must be distinct, got {source!r}, {auxiliary!r}, {destination!r}"
        )

    move_count = 0

    def _solve(n: int, src: str, aux: str, dest: str) -> None:
        nonlocal move_count
        if n == 0:
            return

        # Park the n-1 smaller disks on the spare peg
        _solve(n - 1, src, dest, aux)

        move_count += 1
        on_move(src, dest, move_count)

        # Bring them back on top of the disk just moved
        _solve(n - 1, aux, src, dest)

    logger.debug(f"Solving {disk_count} disks: {source} -> {destination} via {auxiliary}")
    _solve(disk_count, source, auxiliary, destination)
    return move_count


def solution_moves(num_disks: int, source: str = "A", auxiliary: str = "B",
                   destination: str = "C") -> List[Move]:
    """Collect the moves solve() makes, without applying them to anything"""
    moves: List[Move] = []

    def record(src: str, dest: str, index: int) -> None:
        moves.append(Move(from_peg=src, to_peg=dest, index=index))

    solve(num_disks, source, auxiliary, destination, record)
    return moves
