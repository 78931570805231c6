"""Adapters (outbound implementations) for CLIENTELE.

Concrete implementations of the ports declared in `clientele.interfaces`.

Dependency rule: may import `clientele.interfaces` and `clientele.domain`; must
not import `clientele.service_layer`, `clientele.bootstrap` or
`clientele.entrypoints`.
"""
