"""Per-container template data derived from the views a container owns.

A container (screen) may host a list whose sections are built from cell
views.  The design export names cells in free text and may repeat a cell
once per visible row, so the derivation collapses repeats, turns names into
class and variable identifiers, and sizes each section from its cell.
"""

from __future__ import annotations

from collections.abc import Sequence

from designtocode.design.models import (
    ContainerConfig,
    DataVariable,
    Element,
    ElementType,
    Insets,
    ListSection,
    Size,
)

from .naming import lower_camel, pluralize, strip_suffix, upper_camel

CELL_SUFFIX = "Cell"
SECTION_SUFFIX = "Section"


def unique_cells(views: Sequence[Element]) -> dict[str, Element]:
    """Cell views keyed by name; a later cell replaces an earlier namesake.

    Keys keep the order in which each name was first seen.
    """
    cells: dict[str, Element] = {}
    for view in views:
        if view.type == ElementType.CELL:
            cells[view.name] = view
    return cells


def derive_container_config(container: Element, views: Sequence[Element]) -> ContainerConfig:
    """Build the :class:`ContainerConfig` for *container* from its member views.

    Pure: no I/O, and the result depends only on the arguments and their
    order.  Reordering cells that share a name changes which one survives.
    Only the first list view names the list; further lists are ignored.
    """
    lists = [view for view in views if view.type == ElementType.LIST]
    cells = unique_cells(views)

    cell_classes = [lower_camel(name) for name in cells]
    cell_prefixes = [strip_suffix(class_name, CELL_SUFFIX) for class_name in cell_classes]

    data_variables: list[DataVariable] = []
    for prefix in cell_prefixes:
        plural = pluralize(prefix)
        if not plural:
            continue
        data_variables.append(DataVariable(name=plural, type=upper_camel(plural, None)))

    list_sections: list[ListSection] = []
    for name, view in cells.items():
        class_prefix = strip_suffix(upper_camel(name), CELL_SUFFIX)
        if not class_prefix:
            continue
        rect = view.rect
        list_sections.append(
            ListSection(
                class_prefix=class_prefix,
                section_name=class_prefix + SECTION_SUFFIX,
                variable_name=lower_camel(pluralize(class_prefix), None),
                size=Size(width=rect.width, height=rect.height) if rect else Size(),
                # TODO: read insets from the list's layout once the export carries them
                insets=Insets(),
            )
        )

    config = ContainerConfig(container=container)
    if lists:
        config.list_name = upper_camel(lists[0].name)
    config.dynamic_classes = list(cell_classes)
    config.data_variables = data_variables
    config.list_sections = list_sections
    return config
