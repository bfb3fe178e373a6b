"""Stateless presentation of engine snapshots."""

from ecosim.rendering.text_renderer import render_grid, render_legend, render_report, render_summary

__all__ = ["render_grid", "render_legend", "render_report", "render_summary"]
