"""
Database utility functions for common operations.
"""
from typing import Any, Dict, Iterable, List, Tuple


def build_update_query(
    table: str,
    changes: Dict[str, Any],
    allowed_columns: Iterable[str],
    key_column: str = "id",
) -> Tuple[str, List[Any]]:
    """Build an ``UPDATE ... RETURNING *`` statement for a partial update.

    Column names come only from ``allowed_columns``; values are bound as
    positional parameters. ``updated_at`` is always refreshed. The key value
    is expected as the first parameter and is not included in the returned
    argument list.

    Args:
        table: Fully qualified table name
        changes: Column name to new value
        allowed_columns: Columns that may be written
        key_column: Column identifying the row

    Returns:
        Tuple of (query, args) where args excludes the key value

    Raises:
        ValueError: If changes contain a column that is not allowed
    """
    allowed = set(allowed_columns)
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(f"Columns not updatable: {', '.join(sorted(unknown))}")

    assignments = []
    args: List[Any] = []
    for column in sorted(changes):
        args.append(changes[column])
        assignments.append(f"{column} = ${len(args) + 1}")
    assignments.append("updated_at = NOW()")

    query = f"""
            UPDATE {table} SET
                {", ".join(assignments)}
            WHERE {key_column} = $1
            RETURNING *
        """
    return query, args
