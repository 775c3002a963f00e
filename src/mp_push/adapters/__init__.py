"""Adapters – concrete push gateway transports."""
