"""Outbound ports for CLIENTELE.

Framework-free abstract contracts that the service layer depends on and the
adapters implement: the event store, the unit of work, and the ID and hash
generators.

Dependency rule: do not import from `clientele.adapters`, `clientele.bootstrap`
or `clientele.entrypoints`.
"""
