"""
Runs one visualized solve: owns the pegs, applies each move the solver emits,
draws the result and waits before the next move.
"""

import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .config import HanoiConfig
from .pacing import Pacer
from .pegs import Move, PegSet
from .renderer import describe_move, render
from .solver import optimal_move_count, solve

logger = logging.getLogger(__name__)


@dataclass
class RunStats:
    """Statistics for a finished run"""
    num_disks: int
    moves: int
    optimal: int
    elapsed_seconds: float

    @property
    def is_optimal(self) -> bool:
        return self.moves == self.optimal

    def summary(self) -> str:
        return (
            f"Solved in {self.moves} moves. (Optimal = {self.optimal})\n"
            f"Time taken: {self.elapsed_seconds:.2f} seconds"
        )


class HanoiVisualizer:
    """
    Draws the recursive solution one move at a time.

    Example usage:
        viz = HanoiVisualizer(3, config=load_config(pacing="none"))
        viz.show_initial()
        stats = viz.run()
        print(stats.summary())
    """

    def __init__(self, num_disks: int, config: Optional[HanoiConfig] = None,
                 pacer: Optional[Pacer] = None, out: Optional[TextIO] = None):
        self.config = config or HanoiConfig()
        self.num_disks = num_disks
        self.source, self.auxiliary, self.destination = self.config.peg_names
        self.pegs = PegSet(num_disks, names=self.config.peg_names, start=self.source)
        self.pacer = pacer or self.config.create_pacer()
        self.out = out or sys.stdout
        self.style = self.config.render_style
        self.history: List[Move] = []

    def draw(self, move_index: int = 0, description: str = "") -> None:
        self.out.write(render(self.pegs, self.num_disks, move_index, description, self.style))
        self.out.flush()

    def show_initial(self) -> None:
        self.draw()

    def on_move(self, source: str, dest: str, move_index: int) -> None:
        disk = self.pegs.move_top_disk(source, dest)
        self.history.append(Move(from_peg=source, to_peg=dest, disk=disk, index=move_index))
        logger.debug(f"Move {move_index}: disk {disk} {source} -> {dest}")

        self.draw(move_index, describe_move(source, dest))
        self.pacer.pause()

    def run(self) -> RunStats:
        """Solve the puzzle, drawing after every move."""
        logger.info(
            f"Solving {self.num_disks}-disk Hanoi: {self.source} -> {self.destination}"
        )
        start = time.perf_counter()
        moves = solve(self.num_disks, self.source, self.auxiliary, self.destination,
                      self.on_move)
        elapsed = time.perf_counter() - start

        if not self.pegs.is_solved(self.destination):
            logger.error(f"Solver finished but pegs are not solved: {self.pegs.to_dict()}")
            raise RuntimeError("Hanoi solver failed to reach goal state")

        stats = RunStats(
            num_disks=self.num_disks,
            moves=moves,
            optimal=optimal_move_count(self.num_disks),
            elapsed_seconds=elapsed,
        )
        logger.info(f"Successfully solved {self.num_disks}-disk Hanoi in {moves} moves "
                    f"({elapsed:.2f}s)")
        return stats
