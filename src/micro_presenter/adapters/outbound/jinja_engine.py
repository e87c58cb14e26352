"""Jinja2 template engine adapter.

Implements the TemplateEngine and TemplateEngineFactory ports. Named
templates are looked up on the configured search path; ``pathlib.Path``
templates outside it are loaded through an overlay environment rooted at
the file's directory, so ``{% extends %}`` and ``{% include %}`` resolve
relative to the template itself.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Union

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, select_autoescape

from micro_presenter.infrastructure.config import TemplateConfig

logger = logging.getLogger(__name__)


class JinjaTemplateEngine:
    """Renders templates with a Jinja2 environment."""

    def __init__(self, environment: Environment) -> None:
        self._env = environment

    @property
    def environment(self) -> Environment:
        return self._env

    def render_file(self, name: Union[str, Path], parameters: Mapping[str, Any]) -> str:
        """Render a template file.

        Args:
            name: Template name on the search path, or a Path to a file.
            parameters: Template variables.

        Returns:
            Rendered text.

        Raises:
            jinja2.TemplateNotFound: If the template does not exist.
        """
        if isinstance(name, Path):
            env = self._env.overlay(
                loader=ChoiceLoader([FileSystemLoader(str(name.parent)), self._env.loader])
            )
            template = env.get_template(name.name)
        else:
            template = self._env.get_template(name)
        return template.render(**parameters)

    def render_string(self, source: str, parameters: Mapping[str, Any]) -> str:
        """Render an inline template source."""
        return self._env.from_string(source).render(**parameters)


class JinjaEngineFactory:
    """Creates Jinja2 engines from template configuration."""

    def __init__(self, config: TemplateConfig | None = None) -> None:
        self._config = config or TemplateConfig()

    @property
    def config(self) -> TemplateConfig:
        return self._config

    def create(self) -> JinjaTemplateEngine:
        """Create a new engine over the configured templates directory."""
        templates_dir = self._config.templates_dir
        if not templates_dir.is_dir():
            logger.debug(f"Templates directory {templates_dir} does not exist")

        env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "htm", "xml"]) if self._config.autoescape else False,
            auto_reload=self._config.auto_reload,
        )
        return JinjaTemplateEngine(env)
