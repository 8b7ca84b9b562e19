"""
Towers of Hanoi terminal visualizer.
"""

from .pegs import EMPTY, Move, Peg, PegSet
from .solver import optimal_move_count, solution_moves, solve
from .renderer import RenderStyle, describe_move, render
from .pacing import NoDelayPacer, Pacer, SleepPacer, create_pacer
from .config import HanoiConfig, load_config
from .visualizer import HanoiVisualizer, RunStats

__all__ = [
    "EMPTY", "Move", "Peg", "PegSet",
    "optimal_move_count", "solution_moves", "solve",
    "RenderStyle", "describe_move", "render",
    "NoDelayPacer", "Pacer", "SleepPacer", "create_pacer",
    "HanoiConfig", "load_config",
    "HanoiVisualizer", "RunStats",
]
