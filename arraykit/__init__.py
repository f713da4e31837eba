"""Classic array, sorting and string algorithms.

Modules: basics, sorting, strings and two_pointers.
"""

__version__ = "0.1.0"
__all__ = ["basics", "sorting", "strings", "two_pointers"]