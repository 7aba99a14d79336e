"""
sexpc Command-Line Interface
============================

Click-based entry point for the compiler:

- **sexpc**: compile a call-expression program to C-like source
"""

__all__ = ["sexpc"]
