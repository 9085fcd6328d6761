"""Result assembly."""

from .assemblers import build_result, summary_line

__all__ = ["build_result", "summary_line"]
