"""
SQL construction for race queries.

Builds WHERE and ORDER BY clauses from ListFilter / ListOrder inputs,
returning a query string with %s placeholders and the positional
argument list to execute it with.
"""

from typing import Any, Optional

from racing.errors import InvalidOrderError
from racing.race.model import ListFilter, ListOrder, OrderDirection, SortField

BASE_QUERY = """
    SELECT id, meeting_id, name, number, visible, advertised_start_time
    FROM races
"""

DEFAULT_ORDER = " ORDER BY advertised_start_time ASC"

_DIRECTION_TOKENS = {
    "ASCENDING": OrderDirection.ASCENDING,
    "DESCENDING": OrderDirection.DESCENDING,
    "ASC": OrderDirection.ASCENDING,
    "DESC": OrderDirection.DESCENDING,
}


def apply_filter(query: str, filter: Optional[ListFilter]) -> tuple[str, list[Any]]:
    """Append a WHERE clause for each active predicate in the filter."""
    clauses = []
    args: list[Any] = []

    if filter is None:
        return query, args

    if filter.meeting_ids:
        placeholders = ", ".join(["%s"] * len(filter.meeting_ids))
        clauses.append(f"meeting_id IN ({placeholders})")
        args.extend(filter.meeting_ids)

    # False is a real filter value, only None disables it
    if filter.visible is not None:
        clauses.append("visible = %s")
        args.append(filter.visible)

    if clauses:
        query += " WHERE " + " AND ".join(clauses)

    return query, args


def sort_column(order_by: SortField | str) -> str:
    """Resolve an order-by input to its column name."""
    if isinstance(order_by, SortField):
        return order_by.value
    try:
        return SortField(order_by).value
    except ValueError:
        raise InvalidOrderError(f"cannot order races by {order_by!r}") from None


def sort_direction(direction) -> Optional[OrderDirection]:
    """Return the recognised direction, or None to use the store default."""
    if isinstance(direction, OrderDirection):
        return direction
    if isinstance(direction, str):
        return _DIRECTION_TOKENS.get(direction)
    return None


def apply_order(query: str, order: Optional[ListOrder]) -> str:
    """Append an ORDER BY clause, falling back to advertised start time."""
    if order is None or not order.order_by:
        return query + DEFAULT_ORDER

    query += f" ORDER BY {sort_column(order.order_by)}"

    direction = sort_direction(order.direction)
    if direction is not None:
        query += f" {direction.value}"

    return query


def build_list_query(
    base_query: str,
    filter: Optional[ListFilter] = None,
    order: Optional[ListOrder] = None,
) -> tuple[str, list[Any]]:
    """Compose the full list query and its arguments."""
    query, args = apply_filter(base_query, filter)
    return apply_order(query, order), args


def build_get_query(base_query: str, race_id: str) -> tuple[str, list[Any]]:
    """Compose a point lookup by race id."""
    return base_query + " WHERE id = %s", [race_id]
