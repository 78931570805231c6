"""Entrypoints (inbound adapters) for CLIENTELE.

Expose the application to the outside world. Today that is a diagnostic CLI
which replays recorded customer histories; command transports (HTTP, queues)
would live here as well.

Dependency rule: may import `clientele.service_layer` and `clientele.domain`;
avoid importing `clientele.adapters` directly.
"""
