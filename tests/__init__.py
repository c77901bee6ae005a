"""STOREFRONT test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with a database (in-memory or file SQLite).
- contract/     : Shared behavior/invariants enforced across multiple implementations.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Integration hits real dependencies with realistic setup/teardown.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests (hypothesis) live with the layer they exercise.
"""
