"""Text rendering for the command-line views."""

from .render import render_home, render_guide, render_result

__all__ = ["render_home", "render_guide", "render_result"]
