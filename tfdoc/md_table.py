"""Utility for generating Markdown tables."""


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table, escaping pipes inside cells."""
    if not rows:
        return ""
    out = [_row(headers), _row(["---"] * len(headers))]
    out.extend(_row([cell.replace("|", "\\|") for cell in r]) for r in rows)
    return "\n".join(out)


def _row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"
