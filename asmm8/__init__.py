"""Attack surface management: domain and hostname storage, passive subdomain enumeration and Flask handlers."""

__version__ = "0.1.0"