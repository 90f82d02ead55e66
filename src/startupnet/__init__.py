"""STARTUPNET

The user domain of a startup and investor social network: identities and
credentials, roles derived from owned startups and investor profiles, a
follow graph over users and startups, and a micro-post feed.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
