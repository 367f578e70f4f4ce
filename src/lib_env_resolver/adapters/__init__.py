"""Adapters connecting the resolver to host runtime state."""
