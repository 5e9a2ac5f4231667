"""
Routes package for the Blog List application.

This package contains route blueprints:
- api: REST API endpoints for blogs and users
"""
