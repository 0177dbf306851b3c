"""render package."""

from .text_view import TextView, render_grid

__all__ = ["TextView", "render_grid"]
