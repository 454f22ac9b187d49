"""Query helpers shared by the PostgreSQL repositories."""

from sqlalchemy.sql.elements import ColumnElement

LIKE_ESCAPE = "\\"


def escape_like(query: str) -> str:
    """Escape LIKE wildcards so ``query`` matches literally."""
    return (
        query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_ci(column, query: str) -> ColumnElement[bool]:
    """Case-insensitive substring match of ``query`` against ``column``."""
    return column.ilike(f"%{escape_like(query)}%", escape=LIKE_ESCAPE)
