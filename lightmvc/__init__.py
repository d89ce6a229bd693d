"""Building blocks for a small web server: JSON values, INI files, string helpers, sockets, polling and HTTP responses."""

__version__ = "0.1.0"