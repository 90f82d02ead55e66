"""Bootstrap (composition root) for STARTUPNET.

Assembles the application at runtime: wires concrete adapters (SQLAlchemy
unit of work, bcrypt hasher, system clock) to the service-layer handlers,
composes the message bus, and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `startupnet.adapters`, `startupnet.service_layer`,
  `startupnet.interfaces`, `startupnet.domain`, and `startupnet.config`.
- Inner layers must not import `startupnet.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus

__all__ = ["AppContainer", "bootstrap", "build_message_bus"]
