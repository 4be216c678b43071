"""Concrete host bindings."""
