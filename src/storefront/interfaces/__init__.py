"""Interfaces (application boundary) for STOREFRONT.

Defines framework-free application contracts: ABCs and small error types
shared by the service layer and adapters (repositories, unit of work, event
handlers). Business rules stay out of this package.

Dependency rule: this package may import `storefront.domain` only. It may be
imported by `storefront.service_layer`, `storefront.adapters`, and
`storefront.bootstrap`.
"""
