# core/formatters.py

# all pure text utilities
# must never import from models!

from typing import Any, Sequence

BANNER_WIDTH = 40

# === generic text formatters ===


def format_banner_text(title: str, width: int = BANNER_WIDTH) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_list_with_and(items: list[Any]) -> str:
    items = [str(item) for item in items]

    if not items:
        return ""

    if len(items) == 1:
        return items[0]

    if len(items) == 2:
        return " and ".join(items)

    return ", ".join(items[:-1]) + ", and " + items[-1]


# === table formatters ===


def format_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> str:
    """
    Renders rows as a plain-text table with a header row and a separator line.

    Args:
        headers (Sequence[str]): Column titles.
        rows (Sequence[Sequence[Any]]): One sequence of cell values per row, same length as `headers`.

    Returns:
        The table as a single string, without a trailing newline.

    Notes:
        - Each column is as wide as its widest cell (header included).
        - Cells are converted with `str()` and left-aligned.
    """
    cells = [[str(value) for value in row] for row in rows]

    widths = [len(header) for header in headers]
    for row in cells:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(value))

    def format_row(values: Sequence[str]) -> str:
        return " | ".join(f"{value:<{widths[i]}}" for i, value in enumerate(values))

    separator = "-+-".join("-" * width for width in widths)
    lines = [format_row(headers), separator]
    lines.extend(format_row(row) for row in cells)

    return "\n".join(lines)
