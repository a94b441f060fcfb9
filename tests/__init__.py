"""Test suite for Itemflow.

- unit/: Unit tests - stages, store, binding, config in isolation
- api/: API endpoint tests - full request path through TestClient
"""
