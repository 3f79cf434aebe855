"""Proxy and TLS-trust options derived from npm / yarn configuration."""

__version__ = "0.1.0"
