"""Service layer for CLIENTELE.

Orchestrates use cases: command handlers load aggregates through repositories,
execute one command, and persist the recorded events within a unit of work.
The message bus is the entrypoint into this layer.

Dependency rule: may import `clientele.domain` and `clientele.interfaces`; must
not import `clientele.adapters`, `clientele.bootstrap` or `clientele.entrypoints`.
"""
