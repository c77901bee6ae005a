"""Service layer for STOREFRONT.

Implements application use-cases: command handlers, the domain event
dispatcher, orchestration and transaction boundaries. Calls domain objects
and the ports defined in `storefront.interfaces`.

Dependency rule: may import `storefront.domain` and `storefront.interfaces`,
but not `storefront.adapters` or `storefront.bootstrap`.
"""
