"""Swaption pricing GraphQL service."""
