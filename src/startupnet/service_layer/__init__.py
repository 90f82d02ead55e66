"""Service layer for STARTUPNET.

Implements application use-cases: commands and their handlers, the message
bus that dispatches them, read-side views, and transaction boundaries. Calls
domain objects and the outbound ports defined in `startupnet.interfaces`.

Dependency rule: may import `startupnet.domain` and `startupnet.interfaces`,
but not `startupnet.adapters` or `startupnet.entrypoints`.
"""
