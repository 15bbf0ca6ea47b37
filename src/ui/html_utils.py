"""Utilities for preparing HTML snippets before rendering in Streamlit."""
from html import escape
from textwrap import dedent
from typing import Dict, List, Mapping, Union


def html_block(template: str) -> str:
    """
    Normalize multi-line HTML so Streamlit doesn't treat it as Markdown code.

    Streamlit's Markdown renderer interprets lines with >=4 leading spaces as
    code blocks. We dedent and strip leading whitespace on each line to avoid
    that while keeping the markup intact.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def stat_card(label: str, value: Union[int, float, str], accent: str = "#667eea") -> str:
    """Render a small metric card; floats are shown with two decimals."""
    if isinstance(value, float):
        shown = f"{value:,.2f}"
    elif isinstance(value, int):
        shown = f"{value:,}"
    else:
        shown = escape(str(value))

    return html_block(f"""
        <div style="background: #16213e; border-left: 4px solid {accent};
                    border-radius: 12px; padding: 12px 16px; margin-bottom: 12px;">
            <div style="color: #94a3b8; font-size: 0.8rem;">{escape(label)}</div>
            <div style="color: #f1f5f9; font-size: 1.4rem; font-weight: 700;">{shown}</div>
        </div>
    """)


def breakdown_rows(counts: Mapping[str, int]) -> List[Dict[str, Union[str, int, float]]]:
    """
    Turn a category->count mapping into table rows with percentages.

    Percentages are 0.0 when every count is zero.
    """
    total = sum(counts.values())
    rows = []
    for category, count in counts.items():
        rows.append({
            "category": str(getattr(category, "value", category)),
            "count": count,
            "percentage": round((count / total) * 100.0, 1) if total else 0.0,
        })
    return rows
