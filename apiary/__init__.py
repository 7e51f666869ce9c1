"""Apiary - API client backend with a request execution engine."""
