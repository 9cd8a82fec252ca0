"""Layer (z-order) manager."""

from enum import Enum

from ..models.element import Element

Z_STRIDE = 10


class LayerDirection(Enum):
    FRONT = "front"
    BACK = "back"


def paint_order(elements: list[Element]) -> list[Element]:
    """Elements in paint order: z ascending, ties kept in collection order."""
    return sorted(elements, key=lambda el: el.z_index)


def max_z(elements: list[Element]) -> int:
    """Highest z in the collection, never below 0."""
    return max([0, *(el.z_index for el in elements)])


def move_layer(
    elements: list[Element],
    target_id: str,
    direction: LayerDirection | str,
) -> list[Element]:
    """Move an element one step towards the front or back.

    Returns only the elements whose z_index changed, carrying their new value.
    An unknown id, an element already at the extreme, or a swap that would
    pass the locked background all return an empty list.
    """
    direction = LayerDirection(direction)
    ordered = paint_order(elements)

    index = next((i for i, el in enumerate(ordered) if el.id == target_id), None)
    if index is None:
        return []

    swap_index = index + 1 if direction is LayerDirection.FRONT else index - 1
    if swap_index < 0 or swap_index >= len(ordered):
        return []

    # Background stays bottommost
    if ordered[swap_index].is_background:
        return []

    ordered[index], ordered[swap_index] = ordered[swap_index], ordered[index]
    return _renumber(ordered)


def _renumber(ordered: list[Element]) -> list[Element]:
    """Assign dense (position + 1) * 10 z values; background pinned to 0."""
    changed = []
    for position, el in enumerate(ordered):
        new_z = (position + 1) * Z_STRIDE
        if el.is_background:
            new_z = 0
        if el.z_index != new_z:
            changed.append(el.with_z(new_z))
    return changed
