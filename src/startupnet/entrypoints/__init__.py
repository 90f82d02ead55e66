"""Entrypoints (inbound adapters) for STARTUPNET.

Expose the application to the outside world. Today that is the ``startupnet``
CLI (logging setup and database migrations). Entrypoints parse and validate
inputs, call into `startupnet.bootstrap` / `startupnet.service_layer`, and
present results.

Dependency rule: may import `startupnet.service_layer`; avoid importing
`startupnet.adapters` directly.
"""
