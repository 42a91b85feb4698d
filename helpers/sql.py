"""
helpers/sql.py
--------------
Builders for the dynamic parts of SQL statements.

Values never end up in statement text: every builder returns a fragment
containing only `%s` placeholders plus the list of values to bind, in
placeholder order. psycopg2 binds positionally, so the N-th `%s` in the
final statement takes the N-th value in the final parameter list.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Union

from utils.errors import BadRequestError

FieldData = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


def map_field(name: str, js_to_sql: Mapping[str, str]) -> str:
    """
    Translate an API field name to its column name.

    Names without an entry map to themselves, e.g. `email` -> `email`
    while `firstName` -> `first_name` given {"firstName": "first_name"}.
    """
    return js_to_sql.get(name, name)


def quote_ident(name: str) -> str:
    """Quote a column name as a single SQL identifier."""
    return '"' + name.replace('"', '""') + '"'


def sql_for_partial_update(
    data_to_update: FieldData, js_to_sql: Mapping[str, str]
) -> tuple[str, list]:
    """
    Build the SET fragment of a partial UPDATE.

    Args:
        data_to_update: Fields to change, as a mapping (insertion order is
            used) or as an ordered sequence of (field, value) pairs.
        js_to_sql: API field name -> column name, for names that differ.

    Returns:
        (set_cols, values), e.g. for {"firstName": "Aliya", "age": 32}:
        ('"first_name"=%s, "age"=%s', ["Aliya", 32]).
        Callers bind any trailing parameter (the row selector) after
        `values`, at position len(values) + 1.

    Raises:
        BadRequestError: If there is nothing to update.
    """
    items = list(data_to_update.items() if isinstance(data_to_update, Mapping) else data_to_update)
    if not items:
        raise BadRequestError("No data")

    cols = [f"{quote_ident(map_field(name, js_to_sql))}=%s" for name, _ in items]
    return ", ".join(cols), [value for _, value in items]


class WhereClause:
    """
    Accumulates AND-ed predicates and their bound values.

    Predicates are added in the order the caller evaluates its criteria,
    and that order is the parameter order.

        where = WhereClause()
        where.add("salary >= %s", 50000)
        where.add_flag("equity > 0")
        where.add_pattern("title ILIKE %s", "eng")
        where.render()
        # ('salary >= %s AND equity > 0 AND title ILIKE %s', [50000, '%eng%'])
    """

    def __init__(self):
        self.predicates: list[str] = []
        self.values: list = []

    def add(self, predicate: str, value: Any) -> None:
        """Add a predicate with exactly one `%s` placeholder."""
        self.predicates.append(predicate)
        self.values.append(value)

    def add_flag(self, predicate: str) -> None:
        """Add a predicate that binds no value."""
        self.predicates.append(predicate)

    def add_pattern(self, predicate: str, substring: str) -> None:
        """Add a substring match; the substring is bound wrapped in `%`."""
        self.add(predicate, f"%{substring}%")

    def render(self) -> tuple[str, list]:
        """Return (fragment, values); the fragment is "" when nothing was added."""
        return " AND ".join(self.predicates), list(self.values)

    def __bool__(self) -> bool:
        return bool(self.predicates)


def with_where(base_sql: str, where_sql: str) -> str:
    """Append `WHERE <where_sql>` to a statement, or nothing for an empty fragment."""
    if not where_sql:
        return base_sql
    return f"{base_sql} WHERE {where_sql}"
