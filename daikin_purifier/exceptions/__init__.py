"""
Exceptions raised by daikin_purifier.
"""


class DaikinException(Exception):
    """Base exception for all daikin_purifier errors."""
    pass
