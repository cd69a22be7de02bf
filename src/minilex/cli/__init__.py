"""
minilex Command-Line Interface
==============================

- **mltok**: tokenize a source file and print the token stream

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["mltok"]
