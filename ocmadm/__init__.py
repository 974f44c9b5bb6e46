"""Offline helpers for multicluster hub tools: versions, preflight checks, printers and status summaries."""

__version__ = "0.1.0"