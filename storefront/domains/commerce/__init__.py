"""
Commerce Domain

Stores, memberships, catalog, carts and orders for a multi-tenant storefront.
"""
