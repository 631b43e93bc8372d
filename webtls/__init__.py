"""Web TLS configuration for processes exposing a TLS-enabled web endpoint."""

__version__ = "0.1.0"
