"""Adapters connecting the core to its collaborators."""
