"""Tests for building, pruning and flattening list-item trees."""

from taskmigration.migration.section import TaskSection
from taskmigration.migration.tree import build_item_tree, filter_migratable, flatten_tree
from taskmigration.vault.outline import TOP_LEVEL, ListItemRecord


def _rec(line: int, parent: int = TOP_LEVEL, task: str | None = None) -> ListItemRecord:
    return ListItemRecord(line=line, parent_line=parent, task=task)


def _lines(tree) -> list[int]:
    return [r.line for r in flatten_tree(tree)]


RECORDS = [
    _rec(0, task=" "),
    _rec(1, 0, "x"),
    _rec(2, 1, " "),
    _rec(3, task="x"),
    _rec(4, 3, "x"),
    _rec(5),
    _rec(6, 5, " "),
]


class TestBuildItemTree:
    def test_roots_and_children(self):
        tree = build_item_tree(RECORDS)
        assert tree.roots == [0, 3, 5]
        assert tree.children == {0: [1], 1: [2], 2: [], 3: [4], 4: [], 5: [6], 6: []}
        assert len(tree) == 7

    def test_children_in_line_order_regardless_of_input_order(self):
        tree = build_item_tree([_rec(3, 0), _rec(0), _rec(1, 0), _rec(2, 0)])
        assert tree.children[0] == [1, 2, 3]

    def test_restricted_to_section(self):
        tree = build_item_tree(RECORDS, TaskSection(start_line=3, end_line=4))
        assert sorted(tree.items) == [3, 4]
        assert tree.roots == [3]

    def test_orphan_becomes_root(self):
        tree = build_item_tree(RECORDS, TaskSection(start_line=2, end_line=2))
        assert tree.roots == [2]

    def test_parent_after_child_becomes_root(self):
        tree = build_item_tree([_rec(0, 1), _rec(1, 0)])
        assert tree.roots == [0]
        assert tree.children[0] == [1]

    def test_empty(self):
        tree = build_item_tree([])
        assert tree.roots == []
        assert flatten_tree(tree) == []


class TestFilterMigratable:
    def test_mixed_forest(self):
        pruned = filter_migratable(build_item_tree(RECORDS))
        assert pruned.roots == [0, 5]
        assert _lines(pruned) == [0, 1, 2, 5, 6]

    def test_open_task_under_closed_ancestors_is_kept_with_ancestors(self):
        tree = build_item_tree([_rec(0, task="x"), _rec(1, 0, "x"), _rec(2, 1, " ")])
        pruned = filter_migratable(tree)
        assert _lines(pruned) == [0, 1, 2]
        assert pruned.children == {0: [1], 1: [2], 2: []}

    def test_closed_sibling_of_open_task_is_dropped(self):
        tree = build_item_tree([_rec(0), _rec(1, 0, "x"), _rec(2, 0, " "), _rec(3, 0, "-")])
        pruned = filter_migratable(tree)
        assert _lines(pruned) == [0, 2]
        assert pruned.children[0] == [2]

    def test_open_task_carries_its_nested_context(self):
        tree = build_item_tree([_rec(0, task=" "), _rec(1, 0), _rec(2, 0, "x")])
        assert _lines(filter_migratable(tree)) == [0, 1, 2]

    def test_no_open_tasks(self):
        tree = build_item_tree([_rec(0, task="x"), _rec(1, 0), _rec(2, task=">")])
        pruned = filter_migratable(tree)
        assert pruned.roots == []
        assert len(pruned) == 0

    def test_migrated_marker_never_selected(self):
        tree = build_item_tree([_rec(0, task=">"), _rec(1, task=" ")])
        assert _lines(filter_migratable(tree)) == [1]

    def test_custom_markers(self):
        tree = build_item_tree([_rec(0, task="/"), _rec(1, task="x"), _rec(2, task=" ")])
        assert _lines(filter_migratable(tree, {" ", "/"})) == [0, 2]
        assert _lines(filter_migratable(tree, {"/"})) == [0]

    def test_input_tree_is_not_modified(self):
        tree = build_item_tree(RECORDS)
        filter_migratable(tree)
        assert tree.children == {0: [1], 1: [2], 2: [], 3: [4], 4: [], 5: [6], 6: []}

    def test_deep_nesting_keeps_full_ancestor_chain(self):
        records = [_rec(0)] + [_rec(i, i - 1) for i in range(1, 8)] + [_rec(8, 7, " ")]
        records.append(_rec(9, 3, "x"))
        assert _lines(filter_migratable(build_item_tree(records))) == list(range(9))


class TestFlattenTree:
    def test_ascending_without_duplicates(self):
        flat = flatten_tree(build_item_tree(RECORDS))
        lines = [r.line for r in flat]
        assert lines == sorted(set(lines))
        assert lines == [0, 1, 2, 3, 4, 5, 6]

    def test_orphan_roots_sorted_into_place(self):
        tree = build_item_tree([_rec(4, 1, " "), _rec(2, task=" "), _rec(6, 2, " ")])
        assert _lines(tree) == [2, 4, 6]
