"""
ihexgen Command-Line Interface
==============================

This package provides the command-line tools for ihexgen:

- **ihex**: Encode hex digit strings as Intel HEX text

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["ihex"]
