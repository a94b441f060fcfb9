"""Presentation layer: handlers, route registry, middleware and error responses."""
