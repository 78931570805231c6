"""Domain layer for CLIENTELE.

Contains business rules: aggregates, value objects, commands and domain events.
This package is deliberately technology-agnostic.

Dependency rule: do not import from `clientele.adapters` or `clientele.entrypoints`.
"""
