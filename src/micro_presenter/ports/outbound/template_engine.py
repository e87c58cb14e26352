"""Template engine ports.

A TemplateEngineFactory creates a fresh engine per template. The engine
renders either a template file resolved by its file loader, or an
in-memory source string.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Any, Mapping, Protocol, Union


class TemplateEngine(Protocol):
    """Protocol for rendering templates."""

    @abstractmethod
    def render_file(self, name: Union[str, Path], parameters: Mapping[str, Any]) -> str:
        """Render a template file.

        Args:
            name: Template name relative to the loader, or a Path.
            parameters: Template variables.

        Returns:
            Rendered text.

        Raises:
            Engine-specific error if the template does not exist.
        """
        ...

    @abstractmethod
    def render_string(self, source: str, parameters: Mapping[str, Any]) -> str:
        """Render an inline template source."""
        ...


class TemplateEngineFactory(Protocol):
    """Protocol for creating template engines."""

    @abstractmethod
    def create(self) -> TemplateEngine:
        """Create a new engine instance."""
        ...
