"""
Exception chain inspection for field error maps.
"""

from .extraction import extract_field_errors, find_field_errors, iter_chain, next_cause

__all__ = ["extract_field_errors", "find_field_errors", "iter_chain", "next_cause"]
