"""Storefront: multi-tenant store, catalog, cart and order backend."""

__version__ = "0.1.0"
