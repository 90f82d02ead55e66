"""Outbound ports used by the service layer.

Each module defines an abstract contract; concrete SQLAlchemy and in-memory
implementations live in `startupnet.adapters`.
"""
