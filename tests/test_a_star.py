import pytest

from npuzzle.domains.errors import PathReconstructionError
from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.domains.puzzles import DEFAULT_PUZZLES, REFERENCE_STATS
from npuzzle.domains.state import Move, PuzzleState
from npuzzle.heuristics.registry import HeuristicKind
from npuzzle.search.a_star import SolveResult, reconstruct_path, solve

ALL_KINDS = list(HeuristicKind)
A_STAR_KINDS = [k for k in HeuristicKind if k is not HeuristicKind.UNIFORM_COST]


def assert_valid_path(puzzle: NPuzzle, res: SolveResult):
    path = res.path
    assert path[0] == puzzle.start
    assert path[0].move == Move.NONE
    assert puzzle.is_goal(path[-1])
    for prev, cur in zip(path, path[1:]):
        diff = [i for i, (a, b) in enumerate(zip(prev.tiles, cur.tiles)) if a != b]
        assert len(diff) == 2
        assert prev.blank_index in diff and cur.blank_index in diff
        # the two squares are neighbours on the board
        (r1, c1), (r2, c2) = (divmod(i, puzzle.dim) for i in diff)
        assert abs(r1 - r2) + abs(c1 - c2) == 1
        assert cur.g == prev.g + 1
    assert len(path) == res.goal_depth


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_already_solved(kind):
    p = NPuzzle(DEFAULT_PUZZLES["trivial"])
    res = solve(p, kind)
    assert res.solved
    assert res.path == [p.start]
    assert res.goal_depth == 1
    assert res.num_moves == 0
    assert res.moves == []
    assert res.expanded == 0


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_doable_depth_is_the_same_for_every_heuristic(kind):
    p = NPuzzle(DEFAULT_PUZZLES["doable"])
    res = solve(p, kind)
    assert res.solved
    assert res.goal_depth == REFERENCE_STATS["doable"]["depth"] == 5
    assert res.moves == [Move.RIGHT, Move.RIGHT, Move.DOWN, Move.DOWN]
    assert res.heuristic is kind
    assert_valid_path(p, res)


REFERENCE_BOARDS = ["doable", "oh_boy", "wait_for_it", "fifteen_doable", "fifteen_wait_for_it"]


@pytest.mark.parametrize("kind", [HeuristicKind.MANHATTAN, HeuristicKind.MANHATTAN_LINEAR_CONFLICT])
@pytest.mark.parametrize("name", REFERENCE_BOARDS)
def test_reference_statistics_are_reproduced(name, kind):
    ref = REFERENCE_STATS[name]
    res = solve(NPuzzle(DEFAULT_PUZZLES[name]), kind)
    assert res.goal_depth == ref["depth"]
    assert (res.expanded, res.max_queue_size) == ref[kind.short_name]


# Euclidean costs are floats, so equal-f ties can fall differently
# from the documented single-precision runs.
@pytest.mark.parametrize("name", ["doable", "oh_boy", "fifteen_doable"])
def test_euclidean_reference_statistics_within_tolerance(name):
    ref = REFERENCE_STATS[name]
    res = solve(NPuzzle(DEFAULT_PUZZLES[name]), HeuristicKind.EUCLIDEAN)
    assert res.goal_depth == ref["depth"]
    expanded, max_queue = ref["euclidean"]
    assert res.expanded == pytest.approx(expanded, rel=0.05)
    assert res.max_queue_size == pytest.approx(max_queue, rel=0.05)


def test_easy_board():
    p = NPuzzle(DEFAULT_PUZZLES["easy"])
    res = solve(p, HeuristicKind.MANHATTAN)
    assert res.moves == [Move.DOWN, Move.DOWN]
    assert res.goal_depth == 3


def test_two_by_two():
    p = NPuzzle([0, 1, 3, 2])
    res = solve(p, HeuristicKind.MISPLACED_TILE)
    assert [s.tiles for s in res.path] == [(0, 1, 3, 2), (1, 0, 3, 2), (1, 2, 3, 0)]
    assert res.moves == [Move.RIGHT, Move.DOWN]


@pytest.mark.parametrize("kind", A_STAR_KINDS)
def test_fifteen_doable(kind):
    p = NPuzzle(DEFAULT_PUZZLES["fifteen_doable"])
    res = solve(p, kind)
    assert res.goal_depth == REFERENCE_STATS["fifteen_doable"]["depth"]
    assert_valid_path(p, res)


def test_oh_boy_optimal_depth_and_expansion_ordering():
    p = NPuzzle(DEFAULT_PUZZLES["oh_boy"])
    results = {k: solve(p, k) for k in HeuristicKind}
    depth = REFERENCE_STATS["oh_boy"]["depth"]
    assert results[HeuristicKind.UNIFORM_COST].goal_depth == depth
    assert results[HeuristicKind.MANHATTAN].goal_depth == depth
    assert results[HeuristicKind.MANHATTAN_LINEAR_CONFLICT].goal_depth == depth
    assert results[HeuristicKind.EUCLIDEAN].goal_depth == depth
    assert results[HeuristicKind.MISPLACED_TILE].goal_depth == depth
    for res in results.values():
        assert_valid_path(p, res)

    n = {k: r.expanded for k, r in results.items()}
    assert n[HeuristicKind.MANHATTAN_LINEAR_CONFLICT] <= n[HeuristicKind.MANHATTAN]
    assert n[HeuristicKind.MANHATTAN] <= n[HeuristicKind.MISPLACED_TILE]
    assert n[HeuristicKind.MANHATTAN] <= n[HeuristicKind.EUCLIDEAN]
    assert n[HeuristicKind.MISPLACED_TILE] <= n[HeuristicKind.UNIFORM_COST]
    assert n[HeuristicKind.EUCLIDEAN] <= n[HeuristicKind.UNIFORM_COST]


@pytest.mark.parametrize("kind", ALL_KINDS)
@pytest.mark.parametrize("name", ["impossible", "fifteen_impossible"])
def test_unsolvable_short_circuits(name, kind, monkeypatch):
    p = NPuzzle(DEFAULT_PUZZLES[name])

    def boom(state):
        raise AssertionError("no node may be expanded")

    monkeypatch.setattr(p, "children", boom)
    res = solve(p, kind)
    assert res.path == []
    assert res.expanded == 0
    assert res.goal_depth == 0
    assert res.termination == "unsolvable"
    assert not res.solved


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_each_board_expanded_at_most_once(kind, monkeypatch):
    p = NPuzzle(DEFAULT_PUZZLES["oh_boy"])
    seen = []
    real_children = p.children

    def spy(state):
        seen.append(state.key)
        return real_children(state)

    monkeypatch.setattr(p, "children", spy)
    res = solve(p, kind)
    assert len(seen) == len(set(seen)) == res.expanded


def test_counters_are_consistent():
    res = solve(NPuzzle(DEFAULT_PUZZLES["oh_boy"]), HeuristicKind.MANHATTAN)
    assert res.generated >= res.duplicates
    # every accepted child is pushed exactly once; the start is pushed too
    assert res.max_queue_size <= res.generated - res.duplicates + 1
    assert res.time >= 0


def test_repeated_solves_do_not_share_state():
    p = NPuzzle(DEFAULT_PUZZLES["oh_boy"])
    a = solve(p, HeuristicKind.MANHATTAN)
    b = solve(p, HeuristicKind.MANHATTAN)
    assert (a.expanded, a.max_queue_size, a.goal_depth) == (b.expanded, b.max_queue_size, b.goal_depth)
    assert [s.tiles for s in a.path] == [s.tiles for s in b.path]
    assert p.start.g == 0 and p.start.h == 0


def test_invalid_heuristic_behaves_like_uniform_cost():
    p = NPuzzle(DEFAULT_PUZZLES["doable"])
    ucs = solve(p, HeuristicKind.UNIFORM_COST)
    res = solve(p, 99)
    assert res.heuristic is HeuristicKind.UNIFORM_COST
    assert (res.expanded, res.max_queue_size, res.goal_depth) == (ucs.expanded, ucs.max_queue_size, ucs.goal_depth)


def test_expansion_limit():
    res = solve(NPuzzle(DEFAULT_PUZZLES["wait_for_it"]), HeuristicKind.UNIFORM_COST, max_expansions=10)
    assert res.termination == "limit"
    assert res.expanded == 10
    assert res.path == []


def test_timeout():
    res = solve(NPuzzle(DEFAULT_PUZZLES["wait_for_it"]), HeuristicKind.UNIFORM_COST, timeout_sec=0.0)
    assert res.termination == "timeout"
    assert not res.solved


def test_verbose_trace_is_logged(caplog):
    with caplog.at_level("INFO", logger="npuzzle.search.a_star"):
        solve(NPuzzle(DEFAULT_PUZZLES["easy"]), HeuristicKind.MANHATTAN, verbose=True)
    assert "Expanding state" in caplog.text
    assert "g(n) = 0" not in caplog.text
    assert "The best state to expand with g(n) = 1 and h(n) = 1 is..." in caplog.text
    assert "Expanding this node..." in caplog.text
    assert "GOAL" in caplog.text


def test_as_row():
    row = solve(NPuzzle(DEFAULT_PUZZLES["doable"]), "linear_conflict").as_row()
    assert row["heuristic"] == "linear_conflict"
    assert row["goal_depth"] == 5
    assert row["termination"] == "ok"


def test_reconstruct_path_walks_parents():
    a = PuzzleState((0, 1, 3, 2))
    b = PuzzleState((1, 0, 3, 2), g=1, move=Move.RIGHT, parent_key=a.key)
    c = PuzzleState((1, 2, 3, 0), g=2, move=Move.DOWN, parent_key=b.key)
    assert reconstruct_path(c, {a.key: a, b.key: b}) == [a, b, c]


def test_reconstruct_path_missing_parent_is_internal_error():
    orphan = PuzzleState((1, 2, 3, 0), parent_key="1,0,3,2")
    with pytest.raises(PathReconstructionError):
        reconstruct_path(orphan, {})


@pytest.mark.parametrize("tie_break", ["heap", "shallow", "deep", "fifo", "lifo"])
def test_tie_break_does_not_change_depth_on_doable(tie_break):
    res = solve(NPuzzle(DEFAULT_PUZZLES["doable"]), HeuristicKind.MANHATTAN, tie_break=tie_break)
    assert res.goal_depth == 5


def test_unknown_tie_break_rejected():
    with pytest.raises(ValueError):
        solve(NPuzzle(DEFAULT_PUZZLES["doable"]), HeuristicKind.MANHATTAN, tie_break="random")
