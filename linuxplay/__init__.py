"""Small ls, grep and wc tools, a threaded logger and a minimal JSON parser."""

__version__ = "0.1.0"