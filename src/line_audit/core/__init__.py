"""Scan engine: configuration, discovery and the tree walker."""
