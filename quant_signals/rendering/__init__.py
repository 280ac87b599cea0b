"""Text rendering of observations for console output"""

from .formatter import render, render_lines
from .stdout import StdoutRenderer

__all__ = ["render", "render_lines", "StdoutRenderer"]
