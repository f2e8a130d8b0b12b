"""Worked drill solutions, rust-project.json generation and terminal status lines."""

__version__ = "5.2.1"