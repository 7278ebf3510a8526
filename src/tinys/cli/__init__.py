"""
tinyS Command-Line Interface
============================

This package provides the command-line tools for tinyS:

- **tslex**: lexical analyzer, prints the token table of each source file

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["tslex"]
