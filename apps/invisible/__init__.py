"""Conditionally invisible API endpoints, gated by request headers."""
