"""todoappend - Quick-capture and triage for todo.txt files."""

__version__ = "0.1.0"
