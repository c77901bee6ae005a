"""Bootstrap (composition root) for STOREFRONT.

Assembles the application at runtime: wires concrete adapters to service-layer
handlers, composes shared services (message bus, unit of work, event
dispatcher) and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `storefront.adapters`, `storefront.service_layer`,
  `storefront.interfaces`, `storefront.domain`, and `storefront.config`.
- Inner layers must not import `storefront.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
