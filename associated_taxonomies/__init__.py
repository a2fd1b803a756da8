"""
Associated Taxonomies: link taxonomy terms to other terms of the same taxonomy.
"""
__version__ = "1.0.0"
