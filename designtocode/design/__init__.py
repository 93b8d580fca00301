"""Design export models and containment queries.

Usage::

    from designtocode.design import containers, member_views, parse_elements, parse_forest
    from designtocode.utils import load_json

    elements = parse_elements(load_json("metadata.json"))
    forest = parse_forest(load_json("tree.json"))
    for container in containers(elements):
        views = member_views(elements, forest, container)
"""

from designtocode.design.index import (
    containers,
    lookup_property,
    member_views,
    parse_elements,
    parse_forest,
    resolve_member_view_ids,
)
from designtocode.design.models import (
    ContainerConfig,
    DataVariable,
    Element,
    ElementType,
    GeneratedOutput,
    ListSection,
    TreeNode,
)

__all__ = [
    "ContainerConfig",
    "DataVariable",
    "Element",
    "ElementType",
    "GeneratedOutput",
    "ListSection",
    "TreeNode",
    "containers",
    "lookup_property",
    "member_views",
    "parse_elements",
    "parse_forest",
    "resolve_member_view_ids",
]
