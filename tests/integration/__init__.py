"""Integration tests.

Purpose
- Exercise real interactions with external systems (databases).

Guidelines
- Use realistic configuration and setup/teardown per test or suite.
- Minimize mocking; prefer a real SQLite database.
- Mark as 'integration' and keep them slower but reliable.
"""
