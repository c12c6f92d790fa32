"""Renderers for inspecting code page tables."""

from codepage_437.render.chart import chart, chart_text

__all__ = ["chart", "chart_text"]
