"""
Core components for Porta Client.

This package holds the admin portal client together with its wire models,
codecs and error types.
"""

__all__ = ["client"]
