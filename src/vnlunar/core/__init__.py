"""Shared types, errors, JDN arithmetic and validation."""
