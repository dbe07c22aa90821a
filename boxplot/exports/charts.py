"""Export utilities for standalone chart HTML."""

from __future__ import annotations

import html


def build_chart_export_html(
    svg: str, title: str = "Boxplot", background_color: str = "#ffffff"
) -> str:
    """Return a full HTML document wrapping one rendered chart."""
    title_text = html.escape(str(title or ""))
    background = html.escape(str(background_color or "#ffffff"), quote=True)
    title_block = f"<div class='chart-title'>{title_text}</div>" if title_text else ""
    return (
        "<html><head>"
        "<meta charset='utf-8' />"
        f"<title>{title_text or 'Boxplot'}</title>"
        "<style>"
        "body{font-family:Arial,Helvetica,sans-serif;margin:16px;"
        f"background:{background};}}"
        ".chart-card{display:flex;flex-direction:column;align-items:center;}"
        ".chart-title{text-align:center;font-weight:600;"
        "font-size:16px;line-height:1.2;margin-bottom:8px;}"
        ".chart-wrap{max-width:100%;overflow:auto;}"
        ".chart-wrap svg{max-width:100%;height:auto;}"
        "</style>"
        "</head><body>"
        "<div class='chart-card'>"
        f"{title_block}"
        f"<div class='chart-wrap'>{svg}</div>"
        "</div>"
        "</body></html>"
    )
