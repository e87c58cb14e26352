"""Configuration management for the micro presenter."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TemplateConfig(BaseModel):
    """Template engine configuration."""

    templates_dir: Path = Field(default=Path("templates"), description="Template search path")
    autoescape: bool = Field(default=True, description="Autoescape .html/.xml templates")
    auto_reload: bool = Field(default=False, description="Reload templates when files change")


class RoutingConfig(BaseModel):
    """Routing configuration."""

    canonical_redirects: bool = Field(
        default=True, description="Redirect GET/HEAD requests to their canonical URL"
    )


class ServerConfig(BaseModel):
    """Metrics exposition configuration.

    Metrics are always served by the application at ``/metrics``; the
    standalone exposition server is optional.
    """

    metrics_server: bool = Field(
        default=False, description="Also start a Prometheus exposition server on metrics_port"
    )
    metrics_port: int = Field(default=8002, ge=1, le=65535, description="Prometheus metrics port")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="micro_presenter", description="Service name for tracing")


class Config(BaseSettings):
    """Main configuration for the micro presenter."""

    model_config = SettingsConfigDict(
        env_prefix="MICRO_PRESENTER_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    templates: TemplateConfig = Field(default_factory=TemplateConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
