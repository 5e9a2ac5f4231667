"""
Test suite for the Blog List API.

This package contains:
- unit/: model, store and app factory tests
- integration/: HTTP tests through the Flask test client
"""
