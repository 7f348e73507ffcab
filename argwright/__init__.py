"""Argument definitions, value conversion, error messages and small helpers for command line parsing."""

__version__ = "2.0.2"

__all__ = ["strings", "scope", "console", "messages", "argument_base", "arguments"]