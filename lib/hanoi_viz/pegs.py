"""
Peg state for the Towers of Hanoi visualizer.
Holds the three disk stacks and the Move value type.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)

# Returned by PegSet.disk_at for a level with no disk on it
EMPTY = 0

DEFAULT_PEG_NAMES = ("A", "B", "C")


class Move(BaseModel):
    """A single move of the top disk from one peg to another."""
    from_peg: str = Field(..., min_length=1)
    to_peg: str = Field(..., min_length=1)
    disk: Optional[int] = Field(default=None, ge=1)
    index: Optional[int] = Field(default=None, ge=1)

    model_config = {'extra': 'forbid', 'frozen': True}

    @model_validator(mode='after')
    def check_distinct_pegs(self) -> 'Move':
        if self.from_peg == self.to_peg:
            raise ValueError("from_peg and to_peg cannot be the same")
        return self

    def as_pair(self) -> tuple:
        return (self.from_peg, self.to_peg)


@dataclass
class Peg:
    """A named peg; disks are listed bottom to top"""
    name: str
    disks: List[int] = field(default_factory=list)

    def top(self) -> Optional[int]:
        return self.disks[-1] if self.disks else None

    def __len__(self) -> int:
        return len(self.disks)


class PegSet:
    """
    The three pegs of one puzzle.

    All disks start on a single peg, largest at the bottom. The set is mutated
    in place by move_top_disk and does not check size ordering; a caller that
    issues moves from the recursive solver never breaks it.
    """

    def __init__(self, num_disks: int, names: Sequence[str] = DEFAULT_PEG_NAMES,
                 start: Optional[str] = None):
        if num_disks < 0:
            raise ValueError(f"num_disks must be >= 0, got {num_disks}")
        names = tuple(names)
        if len(names) != 3 or len(set(names)) != 3:
            raise ValueError(f"Expected three distinct peg names, got {names}")

        self.num_disks = num_disks
        self._pegs: Dict[str, Peg] = {name: Peg(name) for name in names}

        start = names[0] if start is None else start
        self._peg(start).disks.extend(range(num_disks, 0, -1))

    def _peg(self, name: str) -> Peg:
        try:
            return self._pegs[name]
        except KeyError:
            raise ValueError(f"Unknown peg: {name!r}") from None

    @property
    def names(self) -> tuple:
        return tuple(self._pegs)

    def disks(self, name: str) -> List[int]:
        """Copy of the disks on a peg, bottom to top"""
        return list(self._peg(name).disks)

    def move_top_disk(self, from_peg: str, to_peg: str) -> int:
        """Move the top disk of from_peg onto to_peg and return its size."""
        source = self._peg(from_peg)
        dest = self._peg(to_peg)
        if not source.disks:
            raise ValueError(f"Cannot move from empty peg {from_peg}")

        disk = source.disks.pop()
        dest.disks.append(disk)
        logger.debug(f"Moved disk {disk}: {from_peg} -> {to_peg}")
        return disk

    def disk_at(self, name: str, level: int) -> int:
        """
        Disk size at a 1-based level counted from the bottom of a peg.

        Returns EMPTY when the peg holds fewer disks than the level.
        """
        if level < 1:
            raise ValueError(f"level must be >= 1, got {level}")
        peg = self._peg(name)
        if len(peg) >= level:
            return peg.disks[level - 1]
        return EMPTY

    def top_disk(self, name: str) -> Optional[int]:
        return self._peg(name).top()

    def is_valid_move(self, from_peg: str, to_peg: str) -> bool:
        """Check if a move is valid according to Hanoi rules"""
        if from_peg not in self._pegs or to_peg not in self._pegs:
            return False

        if from_peg == to_peg:
            return False

        moving_disk = self.top_disk(from_peg)
        if moving_disk is None:  # No disk to move
            return False

        top = self.top_disk(to_peg)
        return top is None or moving_disk < top

    def is_solved(self, target: str) -> bool:
        """True when every disk sits on target, largest at the bottom"""
        return self._peg(target).disks == list(range(self.num_disks, 0, -1))

    def to_dict(self) -> dict:
        return {
            'pegs': {name: list(peg.disks) for name, peg in self._pegs.items()},
            'num_disks': self.num_disks,
        }

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={peg.disks}" for name, peg in self._pegs.items())
        return f"PegSet({body})"
