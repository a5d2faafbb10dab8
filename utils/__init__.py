"""
Pure helper functions with no I/O.
"""
