"""
FindClo billing service

Usage-based invoicing for the FindClo marketplace brands.
"""

__version__ = "1.0.0"
