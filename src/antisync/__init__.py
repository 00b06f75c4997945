"""antisync: command-line client that publishes antiblog markup files."""

__version__ = "0.1.0"
