"""Directory tree snapshots with concurrent traversal.

This package provides the node type, the filesystem collaborator and the builder
that walks a directory subtree, filters its entries and aggregates their sizes.
"""
