"""Utility modules for jobfilter."""
