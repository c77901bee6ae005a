"""STOREFRONT

A small order-management domain (customers, products, orders) with a
synchronous domain-event dispatcher and relational aggregate persistence.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
