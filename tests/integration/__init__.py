"""
API test package for the Blog List API.

Tests use the Flask test client and cover:
- CRUD operation testing
- Input validation testing
- Error handling testing
"""
