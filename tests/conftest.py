"""Pytest configuration and fixtures for micro_presenter tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator, Optional

import pytest
from prometheus_client import CollectorRegistry

from micro_presenter.adapters.outbound.jinja_engine import JinjaEngineFactory
from micro_presenter.domain.entities.request import PresenterRequest
from micro_presenter.domain.value_objects import Url
from micro_presenter.infrastructure.config import Config, TemplateConfig
from micro_presenter.infrastructure.container import Container, reset_container
from micro_presenter.infrastructure.metrics import MetricsRegistry
from micro_presenter.ports.outbound.template_engine import TemplateEngineFactory


class FakeHttpRequest:
    """HttpRequest stub with a fixed URL."""

    def __init__(self, url: str, ajax: bool = False, script_path: str = "/") -> None:
        self._url = Url.parse(url, script_path=script_path)
        self._ajax = ajax

    @property
    def url(self) -> Url:
        return self._url

    def is_ajax(self) -> bool:
        return self._ajax


class FakeRouter:
    """Router stub returning a fixed canonical URL and recording calls."""

    def __init__(self, canonical: Optional[str]) -> None:
        self.canonical = canonical
        self.calls: list[tuple[PresenterRequest, Url]] = []

    def construct_url(self, request: PresenterRequest, ref_url: Url) -> Optional[str]:
        self.calls.append((request, ref_url))
        return self.canonical


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def templates_dir(temp_dir: Path) -> Path:
    """Provide a templates directory with a few templates."""
    directory = temp_dir / "templates"
    directory.mkdir()
    (directory / "page.html").write_text("<h1>{{ title | default('Page') }}</h1>")
    (directory / "hello.html").write_text("Hello {{ name }}!")
    (directory / "base.html").write_text("[{{ base_path }}]{{ base_url }}")
    return directory


@pytest.fixture
def test_config(templates_dir: Path) -> Config:
    """Provide a test configuration pointing at the test templates."""
    return Config(templates=TemplateConfig(templates_dir=templates_dir))


@pytest.fixture
def container(test_config: Config) -> Generator[Container, None, None]:
    """Provide a fresh DI container with config and a Jinja2 engine factory."""
    reset_container()
    c = Container()
    c.register_singleton(Config, test_config)
    c.register_singleton(TemplateEngineFactory, JinjaEngineFactory(test_config.templates))
    yield c
    c.clear()


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Separate registry to avoid duplicate registration between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
