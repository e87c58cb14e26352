"""
Micro Presenter - callback-based request dispatcher

Maps a framework request onto a plain callable, resolves its arguments
from a dependency-injection container, and turns the return value into
a redirect, text, or rendered-template response.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
