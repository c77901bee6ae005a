"""Adapters (infrastructure) for STOREFRONT.

Provide concrete implementations of the ports in `storefront.interfaces`
(SQLAlchemy and in-memory repositories, units of work), plus persistence
mapping and related wiring (engine, metadata, table definitions).

Dependency rule: may import `storefront.domain` and `storefront.interfaces`;
neither of those may import this package.
"""
