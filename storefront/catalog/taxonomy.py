"""Category hierarchy.

Storefront categories arrive as a flat list where each record points
at its parent by id. This module derives the navigable tree from that
list, flattens it back, and expands a selected category into the ids of
everything beneath it.

Tree example:
    Clothing              (parent_id=None)
    ├── Men               (parent_id=Clothing)
    │   └── Shirts        (parent_id=Men)
    └── Women             (parent_id=Clothing)
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import replace

import structlog

from storefront.catalog.models import Category

logger = structlog.get_logger()


def build_category_tree(
    categories: Sequence[Category],
    sort_by_name: bool = False,
) -> list[Category]:
    """Build a forest of category nodes from a flat list.

    Roots are categories without a parent reference. Every level keeps
    the relative input order unless ``sort_by_name`` is set. Categories
    whose parent_id matches no input id are left out, together with
    anything under them. A node whose id reappears on its own ancestor
    path is returned without children.

    Args:
        categories: Flat category list.
        sort_by_name: Order every level by name (case-insensitive).

    Returns:
        Root nodes with ``children`` populated. Nodes are fresh copies.
    """
    if not categories:
        return []

    children_by_parent: dict[str, list[Category]] = defaultdict(list)
    roots: list[Category] = []
    for category in categories:
        if category.is_root:
            roots.append(category)
        else:
            children_by_parent[category.parent_id].append(category)

    def order(nodes: list[Category]) -> list[Category]:
        if sort_by_name:
            return sorted(nodes, key=lambda c: c.name.casefold())
        return nodes

    reached: set[str] = set()

    def attach(category: Category, path: frozenset[str]) -> Category:
        reached.add(category.id)
        if category.id in path:
            logger.warning(
                "Category cycle detected",
                category_id=category.id,
                parent_id=category.parent_id,
            )
            return replace(category, children=[])
        path = path | {category.id}
        children = [attach(child, path) for child in order(children_by_parent.get(category.id, []))]
        return replace(category, children=children)

    tree = [attach(root, frozenset()) for root in order(roots)]

    dropped = [c.id for c in categories if c.id not in reached]
    if dropped:
        logger.debug("Dropped unreachable categories", category_ids=dropped)

    return tree


def flatten_category_tree(tree: Iterable[Category]) -> list[Category]:
    """Collapse a category tree into a flat pre-order list.

    Each node appears before its descendants, siblings in ``children``
    order.

    Args:
        tree: Root nodes with children populated.

    Returns:
        Every node of the forest.
    """
    result: list[Category] = []
    stack = list(reversed(list(tree)))
    while stack:
        node = stack.pop()
        result.append(node)
        stack.extend(reversed(node.children))
    return result


def get_all_category_ids(category: Category) -> frozenset[str]:
    """Get the id of a category node and of every node below it.

    Args:
        category: Tree node with children populated.

    Returns:
        Set of ids, the node's own id included.
    """
    ids: set[str] = set()
    stack = [category]
    while stack:
        node = stack.pop()
        if node.id in ids:
            continue
        ids.add(node.id)
        stack.extend(node.children)
    return frozenset(ids)


def expand_category_selection(
    tree: Iterable[Category],
    selected_ids: Iterable[str],
) -> frozenset[str]:
    """Expand selected category ids to include all their descendants.

    Selected ids that are not present in the tree are kept as they are.

    Args:
        tree: Category forest.
        selected_ids: Ids picked by the shopper.

    Returns:
        Descendant-inclusive id set.
    """
    selected = set(selected_ids)
    if not selected:
        return frozenset()

    expanded = set(selected)
    for node in flatten_category_tree(tree):
        if node.id in selected:
            expanded |= get_all_category_ids(node)
    return frozenset(expanded)


def find_category(
    categories: Iterable[Category],
    *,
    category_id: str | None = None,
    slug: str | None = None,
) -> Category | None:
    """Find the first category matching an id or a slug.

    Args:
        categories: Flat categories (or a flattened tree).
        category_id: Category ID to match.
        slug: Category slug to match.

    Returns:
        Category if found, None otherwise.
    """
    for category in categories:
        if category_id is not None and category.id == category_id:
            return category
        if slug is not None and category.slug == slug:
            return category
    return None


class CategoryTreeCache:
    """Memoizes the tree for a category list.

    The tree is rebuilt only when the flat list differs by value from
    the one the cached tree was built from.

    Example usage:
        cache = CategoryTreeCache()
        tree = cache.get(categories)
        cache.get(categories) is tree  # True
    """

    def __init__(self, sort_by_name: bool = False) -> None:
        """Initialize an empty cache.

        Args:
            sort_by_name: Passed through to build_category_tree.
        """
        self._sort_by_name = sort_by_name
        self._source: list[Category] | None = None
        self._tree: list[Category] = []

    def get(self, categories: Sequence[Category]) -> list[Category]:
        """Get the tree for a category list, rebuilding if it changed.

        Args:
            categories: Flat category list.

        Returns:
            Cached or freshly built forest.
        """
        if self._source is None or self._source != list(categories):
            # Snapshot copies so in-place edits to the caller's records are noticed
            self._source = [replace(c) for c in categories]
            self._tree = build_category_tree(self._source, self._sort_by_name)
        return self._tree

    def invalidate(self) -> None:
        """Forget the cached tree."""
        self._source = None
        self._tree = []
