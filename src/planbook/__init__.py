# src/planbook/__init__.py
"""planbook - plan files, plan resolution and plan tools for agent runtimes."""

__version__ = "0.1.0"
