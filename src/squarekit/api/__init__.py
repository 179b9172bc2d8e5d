"""Endpoint wrappers and request bodies for each Square resource."""
