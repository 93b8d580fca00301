"""Containment queries over a design export.

The tree (``tree.json``) only carries uids and names; the flat element list
(``metadata.json``) carries types and geometry.  These helpers join the two:
which elements sit under a container, and which properties a named node
path carries.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import TypeAdapter

from .models import Element, NodeProperties, TreeNode

_ELEMENTS = TypeAdapter(list[Element])
_FOREST = TypeAdapter(list[TreeNode])


def parse_elements(raw: Any) -> list[Element]:
    """Validate the decoded ``metadata.json`` array.

    Raises:
        pydantic.ValidationError: If *raw* is not a list of element records.
    """
    return _ELEMENTS.validate_python(raw)


def parse_forest(raw: Any) -> list[TreeNode]:
    """Validate the decoded ``tree.json`` array.

    Raises:
        pydantic.ValidationError: If *raw* is not a list of tree nodes or a
            ``properties`` payload carries an unknown ``type``.
    """
    return _FOREST.validate_python(raw)


def resolve_member_view_ids(forest: Sequence[TreeNode], container_id: str) -> set[str]:
    """Return the uids of the container's root node and all its descendants.

    Only the first root whose uid equals *container_id* is considered.  An id
    without a root yields an empty set.  ``exclude_on_adopt`` is not consulted
    here; it only matters when templates adopt the tree at runtime.
    """
    for root in forest:
        if root.uid == container_id:
            return set(root.iter_uids())
    return set()


def lookup_property(
    forest: Sequence[TreeNode],
    dotted_path: str,
    parent_path: str | None = None,
) -> NodeProperties | None:
    """Find the properties of the node addressed by a dot-joined name path.

    ``"travelCities.list.cityCell"`` matches the node named ``cityCell`` under
    ``list`` under the root ``travelCities``.  The walk is depth-first and the
    first match wins, even when that node carries no properties; unnamed
    nodes are skipped together with their subtree.
    """
    node = _find_node(forest, dotted_path, parent_path)
    return node.properties if node is not None else None


def _find_node(
    forest: Sequence[TreeNode],
    dotted_path: str,
    parent_path: str | None,
) -> TreeNode | None:
    for node in forest:
        if node.name is None:
            continue
        current = f"{parent_path}.{node.name}" if parent_path is not None else node.name
        if current == dotted_path:
            return node
        if node.elements:
            found = _find_node(node.elements, dotted_path, current)
            if found is not None:
                return found
    return None


def containers(elements: Iterable[Element]) -> list[Element]:
    """Container elements in input order."""
    return [element for element in elements if element.is_container]


def member_views(
    elements: Sequence[Element],
    forest: Sequence[TreeNode],
    container: Element,
) -> list[Element]:
    """Materialise the elements under *container*, in element-list order."""
    view_ids = resolve_member_view_ids(forest, container.id)
    if not view_ids:
        return []
    return [element for element in elements if element.id in view_ids]
