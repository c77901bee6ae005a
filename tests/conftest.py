"""Global pytest fixtures for STOREFRONT."""

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]
