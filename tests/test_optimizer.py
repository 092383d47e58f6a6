"""Tests for the scram planner: detour evaluation and path optimization."""

import logging

import pytest

from cavern.agents.optimizer import (
    DetourRecord,
    evaluate_detour,
    gold_candidates,
    optimize_path,
    plan_escape,
    walk_path,
)
from cavern.game import GraphScramState
from cavern.graph import Cavern, generate_cavern, path_gold, path_weight, shortest_path


def ids(path):
    return [n.id for n in path]


class TestEvaluateDetour:
    """Test pricing of a single detour."""

    def test_cycle_detour(self, cycle_cavern):
        """A detour A -> C -> A on the cycle costs 4 and holds C's gold."""
        a, c = cycle_cavern.node(0), cycle_cavern.node(2)
        detour = evaluate_detour([a], c)

        assert ids(detour.first) == [0, 1, 2]
        assert ids(detour.second) == [2, 1, 0]
        assert detour.total_edges == 4
        assert detour.total_gold == 5
        assert detour.first_fraction == pytest.approx(0.5)
        assert detour.second_fraction == pytest.approx(0.5)

    def test_target_gold_counted_once(self, cycle_cavern):
        """The target sits on both halves but its gold counts once."""
        detour = evaluate_detour([cycle_cavern.node(0)], cycle_cavern.node(2))
        assert detour.total_gold == cycle_cavern.node(2).gold

    def test_uneven_split(self):
        """Budget shares follow the cost of each half."""
        cavern = Cavern()
        for node_id in range(3):
            cavern.add_node(node_id)
        cavern.connect(0, 1, 1)
        cavern.connect(1, 2, 3)
        n = cavern.node
        detour = evaluate_detour([n(0), n(1), n(2)], n(1))

        assert detour.first_edges == 1
        assert detour.second_edges == 3
        assert detour.first_fraction == pytest.approx(0.25)
        assert detour.split_budget(8) == (2, 6)

    def test_split_never_exceeds_budget(self, cycle_cavern):
        """Rounded-down shares sum to at most the budget."""
        detour = evaluate_detour([cycle_cavern.node(0)], cycle_cavern.node(2))
        for moves in range(4, 12):
            first, second = detour.split_budget(moves)
            assert first + second <= moves
            assert first >= detour.first_edges
            assert second >= detour.second_edges

    def test_unreachable_target(self):
        """A target off the component cannot be priced."""
        cavern = Cavern()
        cavern.add_node(0)
        cavern.add_node(1, gold=3)
        assert evaluate_detour([cavern.node(0)], cavern.node(1)) is None

    def test_records_compare_by_identity(self, cycle_cavern):
        """Two identical detours are still different records."""
        a, c = cycle_cavern.node(0), cycle_cavern.node(2)
        assert evaluate_detour([a], c) != evaluate_detour([a], c)

    def test_covers(self, cycle_cavern):
        """Covers reports nodes on either half."""
        detour = evaluate_detour([cycle_cavern.node(0)], cycle_cavern.node(2))
        assert detour.covers(cycle_cavern.node(1))
        assert not detour.covers(cycle_cavern.node(3))


class TestOptimizePath:
    """Test the recursive detour search."""

    def test_cycle_with_budget_four(self, cycle_cavern):
        """
        With budget 4 the round trip through C is taken.

        Ties in the shortest path oracle go to the lower node id, so both
        halves run through B and the route is A-B-C-B-A rather than
        A-B-C-D-A. Both cost 4 and collect the same 5 gold.
        """
        a, c = cycle_cavern.node(0), cycle_cavern.node(2)
        path = optimize_path([a], 4, [c])

        assert ids(path) == [0, 1, 2, 1, 0]
        assert path[0] is a
        assert path[-1] is a
        assert c in path
        assert len(path) == 5
        assert path_weight(path) == 4
        assert path_gold(path) == 5

    def test_cycle_with_budget_two(self, cycle_cavern):
        """With budget 2 no detour fits and the trivial path is kept."""
        a, c = cycle_cavern.node(0), cycle_cavern.node(2)
        baseline = [a]
        path = optimize_path(baseline, 2, [c])
        assert path is baseline
        assert ids(path) == [0]

    def test_reserve_makes_budget_strict(self, cycle_cavern):
        """With one step in reserve a detour must cost less than the budget."""
        a, c = cycle_cavern.node(0), cycle_cavern.node(2)
        assert ids(optimize_path([a], 4, [c], reserve=1)) == [0]
        assert c in optimize_path([a], 5, [c], reserve=1)

    def test_no_candidates_returns_input(self, small_cavern):
        """With nothing to collect the path is returned unchanged."""
        nodes = small_cavern.nodes()
        baseline = shortest_path(nodes[0], nodes[-1])
        assert optimize_path(baseline, 1000, []) is baseline

    def test_equal_gain_detours_both_kept(self, star_cavern):
        """Two spokes with the same gain are both collected when affordable."""
        center = star_cavern.node(0)
        path = optimize_path([center], 6, [star_cavern.node(1), star_cavern.node(2)])

        assert path[0] is center
        assert path[-1] is center
        assert path_gold(path) == 10
        assert path_weight(path) <= 6

    def test_prefers_larger_gain(self):
        """The richer of two equally distant tiles is taken first."""
        cavern = Cavern()
        cavern.add_node(0)
        cavern.add_node(1, gold=3)
        cavern.add_node(2, gold=9)
        cavern.connect(0, 1)
        cavern.connect(0, 2)
        path = optimize_path([cavern.node(0)], 2, [cavern.node(1), cavern.node(2)])
        assert ids(path) == [0, 2, 0]

    def test_skips_unreachable_gold(self, cycle_cavern):
        """Gold outside the component is ignored."""
        cycle_cavern.add_node(9, gold=100)
        a = cycle_cavern.node(0)
        path = optimize_path([a], 4, [cycle_cavern.node(9), cycle_cavern.node(2)])
        assert path_gold(path) == 5
        assert ids(path) == [0, 1, 2, 1, 0]

    def test_unreachable_gold_warned_once(self, cycle_cavern, caplog):
        """An unreachable tile is reported once, not again in each half."""
        cycle_cavern.add_node(9, gold=100)
        a = cycle_cavern.node(0)
        with caplog.at_level(logging.WARNING, logger="cavern.agents.optimizer"):
            optimize_path([a], 4, [cycle_cavern.node(9), cycle_cavern.node(2)])

        warnings = [r for r in caplog.records if "node 9" in r.getMessage()]
        assert len(warnings) == 1

    def test_budget_invariant_on_generated_caverns(self, seeds):
        """The plan never costs more than the budget it was given."""
        for seed in seeds:
            cavern = generate_cavern(7, 9, seed=seed, gold_fraction=0.3)
            nodes = cavern.nodes()
            start, end = nodes[seed % 9], nodes[-1 - seed % 9]
            baseline = shortest_path(start, end)
            base_weight = path_weight(baseline)
            candidates = gold_candidates(nodes, baseline)

            for factor in (1.0, 1.3, 2.0, 4.0):
                budget = int(base_weight * factor)
                path = optimize_path(baseline, budget, candidates)
                assert path[0] is start
                assert path[-1] is end
                assert path_weight(path) <= budget, f"seed {seed}, factor {factor}"

    def test_side_branch_spliced_into_baseline(self):
        """Gold one step off a corridor is picked up on the way through."""
        # 0 - 1 - 2, with 3 hanging off 1
        cavern = Cavern()
        for node_id in range(4):
            cavern.add_node(node_id)
        cavern.node(3).gold = 7
        cavern.connect(0, 1)
        cavern.connect(1, 2)
        cavern.connect(1, 3)
        n = cavern.node
        baseline = [n(0), n(1), n(2)]

        assert ids(optimize_path(baseline, 4, [n(3)])) == [0, 1, 3, 1, 2]
        assert optimize_path(baseline, 3, [n(3)]) is baseline


class TestGoldCandidates:
    """Test candidate selection."""

    def test_excludes_path_and_empty_tiles(self, cycle_cavern):
        """Only gold tiles off the path qualify."""
        n = cycle_cavern.node
        n(1).gold = 2
        assert gold_candidates(cycle_cavern.nodes(), [n(0)]) == [n(1), n(2)]
        assert gold_candidates(cycle_cavern.nodes(), [n(0), n(1)]) == [n(2)]


class TestWalk:
    """Test planning and walking against a scram state."""

    def test_walk_collects_planned_gold(self, cycle_cavern):
        """Walking the cycle plan picks up C's gold and ends on the exit."""
        state = GraphScramState(cycle_cavern, 0, 0, budget=4)
        path = plan_escape(state)
        walk_path(state, path)

        assert state.escaped
        assert state.gold_collected == 5
        assert state.steps_left() == 0
        assert cycle_cavern.node(2).gold == 0

    def test_walk_skips_current_node(self, cycle_cavern):
        """The first node of a plan is where the hunter already stands."""
        state = GraphScramState(cycle_cavern, 0, 2, budget=10)
        walk_path(state, shortest_path(cycle_cavern.node(0), cycle_cavern.node(2)))
        assert state.path == [0, 1, 2]

    def test_unreachable_exit_raises(self, cycle_cavern):
        """Planning from outside the exit's component is refused."""
        cycle_cavern.add_node(9)
        state = GraphScramState(cycle_cavern, 9, 0, budget=10)
        with pytest.raises(ValueError, match="not reachable"):
            plan_escape(state)

    def test_plan_within_state_budget(self, seeds):
        """Plans from a live state fit its steps_left."""
        for seed in seeds:
            cavern = generate_cavern(6, 6, seed=seed)
            state = GraphScramState(cavern, 0, 35, budget=40)
            budget = state.steps_left()
            path = plan_escape(state)
            if path_weight(shortest_path(cavern.node(0), cavern.node(35))) <= budget:
                assert path_weight(path) <= budget
                walk_path(state, path)
                assert state.escaped


def test_detour_record_fields():
    """A record built by hand exposes the derived totals."""
    cavern = Cavern()
    cavern.add_node(0)
    cavern.add_node(1, gold=4)
    cavern.connect(0, 1, 2)
    n = cavern.node
    record = DetourRecord(
        target=n(1), first=[n(0), n(1)], second=[n(1), n(0)], total_gold=4, first_edges=2, second_edges=2
    )
    assert record.total_edges == 4
    assert record.split_budget(5) == (2, 2)
