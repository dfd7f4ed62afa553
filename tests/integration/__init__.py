"""Integration tests for grocerylist.

These tests require a PostgreSQL database, configured with TEST_DATABASE_URL.

Run with: pytest tests/integration/ -v -m integration
Skip with: pytest -m "not integration"
"""
