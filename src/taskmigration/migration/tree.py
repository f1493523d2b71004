"""List-item trees: build from parent-line records, prune to migratable branches, flatten.

Trees are arenas keyed by line number. Nodes never hold references to each
other; ``children`` maps a line to its child lines in document order.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass, field

from taskmigration.migration.checklist import OPEN_MARKER
from taskmigration.migration.section import TaskSection
from taskmigration.vault.outline import ListItemRecord


@dataclass
class ItemTree:
    """A forest of list items."""

    items: dict[int, ListItemRecord] = field(default_factory=dict)
    children: dict[int, list[int]] = field(default_factory=dict)
    roots: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)


def build_item_tree(
    records: Iterable[ListItemRecord], section: TaskSection | None = None
) -> ItemTree:
    """Build a forest from flat records, optionally restricted to a section.

    A record whose parent is outside the selection (or not strictly before it)
    becomes a root rather than being dropped.
    """
    selected = sorted(
        (r for r in records if section is None or section.contains(r.line)),
        key=lambda r: r.line,
    )
    tree = ItemTree()
    for record in selected:
        tree.items[record.line] = record
        tree.children[record.line] = []

    for record in selected:
        parent = record.parent_line
        if not record.is_top_level and parent in tree.items and parent < record.line:
            tree.children[parent].append(record.line)
        else:
            tree.roots.append(record.line)
    return tree


def _subtree(tree: ItemTree, line: int) -> dict[int, list[int]]:
    """Child map of the whole subtree rooted at line."""
    result = {line: list(tree.children[line])}
    for child in tree.children[line]:
        result.update(_subtree(tree, child))
    return result


def _prune(
    tree: ItemTree, line: int, markers: Collection[str]
) -> tuple[bool, dict[int, list[int]]]:
    """Return whether the branch at line qualifies, and the child map of what is kept.

    A migratable task keeps everything nested under it. Any other node is kept
    only as context for qualifying descendants, with just those children.
    """
    if tree.items[line].task in markers:
        return True, _subtree(tree, line)

    kept: list[int] = []
    kept_map: dict[int, list[int]] = {}
    for child in tree.children[line]:
        qualifies, child_map = _prune(tree, child, markers)
        if qualifies:
            kept.append(child)
            kept_map.update(child_map)

    if not kept:
        return False, {}
    kept_map[line] = kept
    return True, kept_map


def filter_migratable(tree: ItemTree, markers: Collection[str] = (OPEN_MARKER,)) -> ItemTree:
    """Keep branches holding at least one task whose marker is in `markers`."""
    pruned = ItemTree()
    for root in tree.roots:
        qualifies, kept_map = _prune(tree, root, markers)
        if not qualifies:
            continue
        pruned.roots.append(root)
        pruned.children.update(kept_map)
        for line in kept_map:
            pruned.items[line] = tree.items[line]
    return pruned


def flatten_tree(tree: ItemTree) -> list[ListItemRecord]:
    """All nodes of the tree in ascending line order."""
    flat: list[ListItemRecord] = []
    seen: set[int] = set()

    def visit(line: int) -> None:
        if line in seen:
            return
        seen.add(line)
        flat.append(tree.items[line])
        for child in tree.children.get(line, []):
            visit(child)

    for root in tree.roots:
        visit(root)
    flat.sort(key=lambda r: r.line)
    return flat
