"""
Shared helpers for the Associated Taxonomies apps.
"""
