"""Per-request template.

A Template collects parameters during dispatch and renders either a
template file (looked up by the engine's file loader) or an inline source
string (rendered through the engine's in-memory string loader). It is
created for a single request and discarded after rendering.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

if TYPE_CHECKING:
    from micro_presenter.ports.outbound.template_engine import TemplateEngine


class Template:
    """Mutable template bound to a rendering engine."""

    def __init__(self, engine: "TemplateEngine") -> None:
        self._engine = engine
        self._parameters: dict[str, Any] = {}
        self._file: Optional[Union[str, Path]] = None
        self._source: Optional[str] = None

    @property
    def engine(self) -> "TemplateEngine":
        return self._engine

    @property
    def file(self) -> Optional[Union[str, Path]]:
        return self._file

    @property
    def source(self) -> Optional[str]:
        return self._source

    @property
    def is_inline(self) -> bool:
        """True when the template renders an in-memory source string."""
        return self._source is not None

    @property
    def parameters(self) -> dict[str, Any]:
        return dict(self._parameters)

    def set_file(self, file: Union[str, Path]) -> Template:
        """Render the named template file (clears any inline source)."""
        self._file = file
        self._source = None
        return self

    def set_source(self, source: str) -> Template:
        """Render an inline template source (clears any file)."""
        self._source = source
        self._file = None
        return self

    def set_parameters(self, parameters: Mapping[str, Any]) -> Template:
        """Merge parameters into the template."""
        self._parameters.update(parameters)
        return self

    def add_parameter(self, name: str, value: Any) -> Template:
        self._parameters[name] = value
        return self

    def get_parameter(self, name: str, default: Any = None) -> Any:
        return self._parameters.get(name, default)

    def render(self) -> str:
        """Render the template.

        Returns:
            Rendered text.

        Raises:
            ValueError: If neither a file nor a source was set.
        """
        if self._source is not None:
            return self._engine.render_string(self._source, self._parameters)
        if self._file is None:
            raise ValueError("Template file is not specified.")
        return self._engine.render_file(self._file, self._parameters)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        target = "<inline>" if self.is_inline else self._file
        return f"{type(self).__name__}({target!r})"
