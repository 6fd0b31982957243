"""Rich renderers for Pay Desk CLI output."""

from .salary_renderer import render_salary_result, render_bands, render_about

__all__ = [
    "render_salary_result",
    "render_bands",
    "render_about",
]
