DIRECTIONS = {"up": -1, "down": 1, -1: -1, 1: 1}


def parse_direction(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().lower()
        if value in ("-1", "1"):
            value = int(value)
    return DIRECTIONS.get(value)


def spread_keys(siblings, attr="order"):
    """Make ``attr`` strictly increasing along ``siblings`` (display order).

    Keys that already increase are left alone; a tied, missing or smaller key
    is bumped to one past its predecessor.
    """
    previous = None
    for sibling in siblings:
        value = getattr(sibling, attr)
        if value is None or (previous is not None and value <= previous):
            value = 0 if previous is None else previous + 1
            setattr(sibling, attr, value)
        previous = value


def swap_with_neighbour(siblings, target, direction, attr="order"):
    """Swap ``attr`` between ``target`` and its neighbour in ``siblings``.

    ``siblings`` must already be in display order. Returns the neighbour, or
    None when ``target`` is at the edge and nothing changed.
    """
    index = siblings.index(target)
    other_index = index + direction
    if other_index < 0 or other_index >= len(siblings):
        return None
    spread_keys(siblings, attr)
    other = siblings[other_index]
    a, b = getattr(target, attr), getattr(other, attr)
    setattr(target, attr, b)
    setattr(other, attr, a)
    return other
