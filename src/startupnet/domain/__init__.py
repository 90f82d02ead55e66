"""Domain layer for STARTUPNET.

Contains business rules: entities, value objects, validation rules and domain
errors. This package is deliberately technology-agnostic.

Dependency rule: do not import from `startupnet.adapters`,
`startupnet.service_layer` or `startupnet.entrypoints`.
"""
