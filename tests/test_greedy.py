import math

import pytest

from algokit.greedy import (
    FractionalSelection,
    Job,
    KnapsackItem,
    MergeNode,
    TreeNode,
    build_tree,
    distribute_programs,
    fractional_knapsack,
    mean_retrieval_time,
    optimal_merge,
    select_activities,
    sequence_jobs,
    split_vertices,
)

STARTS = [1, 3, 0, 5, 3, 5, 6, 8, 8, 2, 12]
FINISHES = [4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14]


def test_select_activities_sample():
    chosen = select_activities(zip(STARTS, FINISHES))
    assert chosen == [(1, 4), (5, 7), (8, 11), (12, 14)]


def test_selected_activities_do_not_overlap():
    chosen = select_activities([(0, 3), (2, 5), (3, 4), (4, 9), (5, 6)])
    for (_, finish), (start, _) in zip(chosen, chosen[1:]):
        assert start >= finish


def test_select_activities_rejects_finish_before_start():
    with pytest.raises(ValueError):
        select_activities([(5, 2)])


def test_select_activities_empty():
    assert select_activities([]) == []


def test_fractional_knapsack_takes_everything_when_it_fits():
    items = [KnapsackItem(2, 10), KnapsackItem(3, 5), KnapsackItem(5, 15)]
    selection = fractional_knapsack(items, 100)
    assert selection.profit == pytest.approx(30)
    assert all(fraction == 1.0 for _, fraction in selection.choices)


def test_fractional_knapsack_cuts_last_item():
    selection = fractional_knapsack([(4, 8)], 2)
    assert selection.choices == ((KnapsackItem(4, 8), 0.5),)
    assert selection.profit == pytest.approx(4)


def test_fractional_knapsack_fills_capacity_exactly():
    weights = [2, 3, 5, 7, 1, 4, 1]
    profits = [10, 5, 15, 7, 6, 18, 3]
    selection = fractional_knapsack(list(zip(weights, profits)), 15)
    assert selection.weight == pytest.approx(15)
    ratios = [item.ratio for item, _ in selection.choices]
    assert ratios == sorted(ratios, reverse=True)


def test_fractional_knapsack_rejects_bad_weight():
    with pytest.raises(ValueError):
        fractional_knapsack([KnapsackItem(0, 5)], 10)


def test_fractional_knapsack_rejects_negative_capacity():
    with pytest.raises(ValueError):
        fractional_knapsack([KnapsackItem(1, 5)], -1)


def test_fractional_selection_empty_profit():
    assert FractionalSelection(()).profit == 0


def test_optimal_merge_sample_cost():
    root = optimal_merge([20, 30, 10, 5, 30])
    assert root.merge_cost == 205


def test_optimal_merge_root_weight_is_total():
    weights = [2, 13, 15, 22, 25, 30, 35, 55, 84, 97]
    root = optimal_merge(weights)
    assert root.weight == sum(weights)


def test_optimal_merge_single_file():
    root = optimal_merge([7])
    assert root == MergeNode(7)
    assert root.merge_cost == 0


def test_optimal_merge_requires_files():
    with pytest.raises(ValueError):
        optimal_merge([])


def test_sequence_jobs_single_slot_takes_best():
    jobs = [Job(1, 1, 20), Job(2, 1, 50), Job(3, 1, 10)]
    assert sequence_jobs(jobs) == [Job(2, 1, 50)]


def test_sequence_jobs_all_fit():
    jobs = [Job(1, 3, 5), Job(2, 1, 7), Job(3, 2, 9)]
    scheduled = sequence_jobs(jobs)
    assert sorted(job.id for job in scheduled) == [1, 2, 3]
    assert [job.deadline for job in scheduled] == [1, 2, 3]


def test_sequence_jobs_meets_deadlines():
    jobs = [Job(1, 2, 100), Job(2, 1, 19), Job(3, 2, 27), Job(4, 1, 25), Job(5, 3, 15)]
    scheduled = sequence_jobs(jobs)
    for slot, job in enumerate(scheduled, start=1):
        assert job.deadline >= slot


def test_sequence_jobs_skips_non_positive_deadline():
    assert sequence_jobs([Job(1, 0, 100)]) == []


def test_distribute_programs_keeps_every_program():
    lengths = [12, 5, 8, 32, 7, 5, 18, 26, 4, 3, 11, 10, 6]
    storage = distribute_programs(lengths, 3)
    assert sorted(length for tape in storage for length in tape) == sorted(lengths)
    sizes = [len(tape) for tape in storage]
    assert max(sizes) - min(sizes) <= 1
    assert all(tape == sorted(tape) for tape in storage)


def test_distribute_programs_rejects_no_tapes():
    with pytest.raises(ValueError):
        distribute_programs([1, 2], 0)


def test_mean_retrieval_time_single_program():
    assert mean_retrieval_time([9]) == 9


def test_mean_retrieval_time_favours_sorted_order():
    assert mean_retrieval_time([1, 5, 9]) < mean_retrieval_time([9, 5, 1])


def test_mean_retrieval_time_empty_tape():
    with pytest.raises(ValueError):
        mean_retrieval_time([])


EDGES = [
    ("1", "2", 4), ("1", "3", 2), ("2", "4", 2), ("3", "5", 1), ("3", "6", 3),
    ("4", "7", 1), ("4", "8", 4), ("5", "9", 2), ("6", "10", 3),
]


def test_build_tree_structure():
    root = build_tree(EDGES)
    assert root.value == "1"
    assert root.weight == 0
    assert [child.value for child in root.children] == ["2", "3"]


def test_build_tree_unknown_parent():
    with pytest.raises(ValueError):
        build_tree([("a", "b", 1), ("x", "y", 2)])


def test_build_tree_requires_edges():
    with pytest.raises(ValueError):
        build_tree([])


def test_split_vertices_sample():
    root = build_tree(EDGES)
    assert [node.value for node in split_vertices(root, 5)] == ["4", "10"]


def test_split_vertices_large_tolerance():
    root = build_tree(EDGES)
    assert split_vertices(root, math.inf) == []


def test_split_vertices_zero_tolerance_splits_every_vertex():
    root = build_tree(EDGES)
    values = [node.value for node in split_vertices(root, 0)]
    assert sorted(values) == sorted(child for _, child, _ in EDGES)


def test_tree_node_leaf():
    leaf = TreeNode("a", 3)
    assert split_vertices(leaf, 1) == []