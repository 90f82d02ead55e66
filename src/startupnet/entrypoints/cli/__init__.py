"""Command-line interface for STARTUPNET."""
