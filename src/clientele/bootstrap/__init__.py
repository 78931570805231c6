"""Bootstrap (composition root) for CLIENTELE.

Assembles the application at runtime: wires concrete adapters to service-layer
handlers, composes shared services (message bus, unit of work, generators) and
reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `clientele.adapters`, `clientele.service_layer`,
  `clientele.interfaces`, `clientele.domain`, and `clientele.config`.
- Inner layers must not import `clientele.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
