"""Adapters binding application ports to the bundled renderers."""
