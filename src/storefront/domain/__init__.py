"""Domain layer for STOREFRONT.

Contains business rules: aggregates, value objects, domain events and domain
errors. This package is deliberately technology-agnostic.

Dependency rule: do not import from `storefront.adapters` or `storefront.service_layer`.
"""
