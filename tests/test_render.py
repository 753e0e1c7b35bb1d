"""Tests for Markdown rendering."""

from pathlib import Path

from tfdoc.block_type import BlockType
from tfdoc.doc_item import DocItem
from tfdoc.md_table import md_table
from tfdoc.render import render, render_files

ITEMS = [
    DocItem(BlockType.COMMENT, "", ["Title: Example", "This is a demo."]),
    DocItem(BlockType.RESOURCE, "aws_instance.web", []),
    DocItem(BlockType.VARIABLE, "region", ["AWS region"]),
    DocItem(BlockType.OUTPUT, "ip", []),
]


def test_md_table() -> None:
    """Test Markdown table generation."""
    assert md_table([], []) == ""

    headers = ["Name", "Value"]
    rows = [["A", "1"], ["B", "2"]]
    expected = "| Name | Value |\n| --- | --- |\n| A | 1 |\n| B | 2 |"
    assert md_table(headers, rows) == expected


def test_render_list() -> None:
    """Verify list output with title, sections and empty descriptions."""
    expected = (
        "# Example\n"
        "\n"
        "This is a demo.\n"
        "\n"
        "## Resources\n"
        "\n"
        "* `aws_instance.web`\n"
        "\n"
        "## Inputs\n"
        "\n"
        "* `region`: AWS region\n"
        "\n"
        "## Outputs\n"
        "\n"
        "* `ip`\n"
    )
    assert render(ITEMS) == expected


def test_render_table() -> None:
    """Verify table output for each section."""
    expected = (
        "## Resources\n"
        "\n"
        "| Resource | Description |\n"
        "| --- | --- |\n"
        "| `aws_instance.web` |  |\n"
        "\n"
        "## Inputs\n"
        "\n"
        "| Input | Description |\n"
        "| --- | --- |\n"
        "| `region` | AWS region |\n"
        "\n"
        "## Outputs\n"
        "\n"
        "| Output | Description |\n"
        "| --- | --- |\n"
        "| `ip` |  |\n"
    )
    assert render(ITEMS[1:], as_table=True) == expected


def test_render_title_only() -> None:
    """Verify a title without body lines."""
    items = [DocItem(BlockType.COMMENT, "", ["Title: Only"])]
    assert render(items) == "# Only\n"


def test_render_joins_descriptions() -> None:
    """Verify that multiple description lines are joined by spaces."""
    items = [DocItem(BlockType.RESOURCE, "a.b", ["The web", "server"])]
    assert render(items) == "## Resources\n\n* `a.b`: The web server\n"


def test_render_omit_empty_resources() -> None:
    """Verify that empty resources can be dropped, along with their section."""
    out = render(ITEMS[1:], omit_empty_resources=True)
    assert "## Resources" not in out
    assert "* `ip`" in out


def test_render_skips_empty_sections() -> None:
    """Verify that nothing is rendered for no items."""
    assert render([]) == ""
    out = render([DocItem(BlockType.OUTPUT, "o", [])])
    assert out == "## Outputs\n\n* `o`\n"


def test_render_files() -> None:
    """Verify the list of scanned files in both formats."""
    paths = [Path("x/main.tf"), Path("x/outputs.tf")]
    assert render_files(paths) == "## Files\n\n* `main.tf`\n* `outputs.tf`\n"
    assert render_files(paths, as_table=True) == (
        "## Files\n\n| File |\n| --- |\n| `main.tf` |\n| `outputs.tf` |\n"
    )
    assert render_files([]) == ""


def test_md_table_escapes_pipes() -> None:
    """Verify that pipes in cells do not break the table."""
    assert md_table(["A"], [["x | y"]]) == "| A |\n| --- |\n| x \\| y |"
