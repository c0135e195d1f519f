from npuzzle.domains.display import format_solution, format_state, format_step
from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.domains.puzzles import DEFAULT_PUZZLES
from npuzzle.domains.state import Move, PuzzleState
from npuzzle.search.a_star import solve


def test_format_state_three_by_three():
    assert format_state(DEFAULT_PUZZLES["oh_boy"], 3) == "8 7 1\n6 0 2\n5 4 3"


def test_format_state_pads_to_widest_tile():
    text = format_state(DEFAULT_PUZZLES["fifteen_doable"], 4)
    assert text.splitlines()[0] == "2  0  3  4"
    assert text.splitlines()[1] == "1  10 6  8"


def test_step_headers():
    assert format_step(0, PuzzleState((1, 2, 3, 0)), 2).splitlines()[0] == "------ START ------"
    s = PuzzleState((1, 2, 3, 0), move=Move.DOWN)
    assert format_step(2, s, 2).splitlines()[0] == "-- 2: MOVE DOWN ---"
    s = PuzzleState((1, 2, 3, 0), move=Move.RIGHT)
    assert format_step(1, s, 2).splitlines()[0] == "-- 1: MOVE RIGHT --"


def test_no_solution_banner():
    text = format_solution([], 3)
    assert "-- NO SOLUTION --" in text
    assert text.startswith("*************** SOLUTION ****************")


def test_solution_trace_lists_every_step():
    p = NPuzzle(DEFAULT_PUZZLES["easy"])
    text = format_solution(solve(p, "manhattan").path, p.dim)
    assert "------ START ------" in text
    assert "-- 1: MOVE DOWN ---" in text
    assert "-- 2: MOVE DOWN ---" in text
    assert text.rstrip().endswith("1 2 3\n4 5 6\n7 8 0\n\n*****************************************")
