"""
Tests for the peg state and the recursive solver
"""

import pytest
from pydantic import ValidationError

from hanoi_viz.pegs import EMPTY, Move, PegSet
from hanoi_viz.solver import optimal_move_count, solution_moves, solve


class TestPegSet:
    """Test PegSet class"""

    def test_initial_state(self):
        """All disks start on the first peg, largest at the bottom"""
        pegs = PegSet(3)

        assert pegs.names == ("A", "B", "C")
        assert pegs.disks("A") == [3, 2, 1]
        assert pegs.disks("B") == []
        assert pegs.disks("C") == []

    def test_custom_start_peg(self):
        pegs = PegSet(2, names=("X", "Y", "Z"), start="Y")
        assert pegs.disks("Y") == [2, 1]
        assert pegs.disks("X") == []

    def test_zero_disks(self):
        pegs = PegSet(0)
        assert pegs.to_dict()['pegs'] == {'A': [], 'B': [], 'C': []}
        assert pegs.is_solved("C")

    def test_invalid_construction(self):
        with pytest.raises(ValueError):
            PegSet(-1)
        with pytest.raises(ValueError):
            PegSet(3, names=("A", "A", "B"))
        with pytest.raises(ValueError):
            PegSet(3, names=("A", "B"))

    def test_move_top_disk(self):
        pegs = PegSet(3)
        disk = pegs.move_top_disk("A", "C")

        assert disk == 1
        assert pegs.disks("A") == [3, 2]
        assert pegs.disks("C") == [1]

    def test_move_from_empty_peg(self):
        pegs = PegSet(2)
        with pytest.raises(ValueError, match="empty"):
            pegs.move_top_disk("B", "C")
        assert pegs.disks("A") == [2, 1]

    def test_move_unknown_peg(self):
        pegs = PegSet(2)
        with pytest.raises(ValueError, match="Unknown peg"):
            pegs.move_top_disk("A", "D")

    def test_move_does_not_check_size_order(self):
        """Ordering is the solver's job, not the container's"""
        pegs = PegSet(2)
        pegs.move_top_disk("A", "B")
        pegs.move_top_disk("A", "B")
        assert pegs.disks("B") == [1, 2]

    def test_disk_at(self):
        pegs = PegSet(3)
        pegs.move_top_disk("A", "B")

        assert pegs.disk_at("A", 1) == 3
        assert pegs.disk_at("A", 2) == 2
        assert pegs.disk_at("A", 3) == EMPTY
        assert pegs.disk_at("B", 1) == 1
        assert pegs.disk_at("C", 1) == EMPTY

    def test_disk_at_invalid_level(self):
        with pytest.raises(ValueError):
            PegSet(3).disk_at("A", 0)

    def test_is_valid_move(self):
        pegs = PegSet(3)
        assert pegs.is_valid_move("A", "C")
        assert not pegs.is_valid_move("B", "C")  # empty source
        assert not pegs.is_valid_move("A", "A")
        assert not pegs.is_valid_move("A", "Q")

        pegs.move_top_disk("A", "C")
        # Disk 2 cannot go on disk 1
        assert not pegs.is_valid_move("A", "C")
        assert pegs.is_valid_move("C", "B")

    def test_to_dict(self):
        pegs = PegSet(2)
        pegs.move_top_disk("A", "B")
        assert pegs.to_dict() == {
            'pegs': {'A': [2], 'B': [1], 'C': []},
            'num_disks': 2,
        }


class TestMove:
    """Test Move model"""

    def test_valid_move(self):
        move = Move(from_peg="A", to_peg="C", disk=1, index=1)
        assert move.as_pair() == ("A", "C")

    def test_same_peg_rejected(self):
        with pytest.raises(ValidationError):
            Move(from_peg="A", to_peg="A")

    def test_invalid_index(self):
        with pytest.raises(ValidationError):
            Move(from_peg="A", to_peg="B", index=0)


class TestSolver:
    """Test the recursive solver"""

    @pytest.mark.parametrize("num_disks", [0, 1, 2, 3, 4, 5, 8, 10])
    def test_move_count(self, num_disks):
        calls = []
        total = solve(num_disks, "A", "B", "C", lambda s, d, i: calls.append((s, d, i)))

        assert total == len(calls) == max(0, 2 ** num_disks - 1)
        assert total == optimal_move_count(num_disks)

    def test_move_indices_are_sequential(self):
        indices = []
        solve(4, "A", "B", "C", lambda s, d, i: indices.append(i))
        assert indices == list(range(1, 16))

    def test_one_disk(self):
        assert [m.as_pair() for m in solution_moves(1)] == [("A", "C")]

    def test_two_disks(self):
        assert [m.as_pair() for m in solution_moves(2)] == [
            ("A", "B"), ("A", "C"), ("B", "C"),
        ]

    def test_three_disks(self):
        moves = solution_moves(3)
        assert [m.as_pair() for m in moves] == [
            ("A", "C"), ("A", "B"), ("C", "B"), ("A", "C"),
            ("B", "A"), ("B", "C"), ("A", "C"),
        ]
        assert [m.index for m in moves] == list(range(1, 8))

    @pytest.mark.parametrize("num_disks", [1, 2, 3, 6, 9])
    def test_moves_keep_size_order_and_reach_goal(self, num_disks):
        pegs = PegSet(num_disks)

        def apply(src, dest, index):
            assert pegs.is_valid_move(src, dest), f"Move {index} {src}->{dest} is illegal"
            pegs.move_top_disk(src, dest)
            for name in pegs.names:
                disks = pegs.disks(name)
                assert disks == sorted(disks, reverse=True)

        solve(num_disks, "A", "B", "C", apply)

        assert pegs.disks("C") == list(range(num_disks, 0, -1))
        assert pegs.disks("A") == []
        assert pegs.disks("B") == []
        assert pegs.is_solved("C")

    def test_custom_peg_assignment(self):
        moves = solution_moves(2, source="C", auxiliary="A", destination="B")
        assert [m.as_pair() for m in moves] == [("C", "A"), ("C", "B"), ("A", "B")]

    def test_negative_disk_count(self):
        with pytest.raises(ValueError):
            solve(-1, "A", "B", "C", lambda s, d, i: None)

    def test_duplicate_peg_names(self):
        with pytest.raises(ValueError):
            solve(2, "A", "A", "C", lambda s, d, i: None)

    def test_zero_disks_never_calls_back(self):
        def fail(src, dest, index):
            raise AssertionError("no moves expected")

        assert solve(0, "A", "B", "C", fail) == 0
