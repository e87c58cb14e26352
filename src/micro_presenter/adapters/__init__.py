"""Adapters layer - implementations of ports.

Adapters connect the domain to external systems:
- Inbound adapters: FastAPI routes that dispatch to the presenter
- Outbound adapters: Jinja2 templates, Starlette request and route table
"""
