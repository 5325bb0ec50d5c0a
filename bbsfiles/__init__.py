"""Readers and writers for the record files of a PTT-style BBS."""

__version__ = "0.1.0"

__all__ = [
    "const",
    "encoding",
    "fav",
    "fileheader",
    "fnv",
    "login_recent",
    "path",
    "records",
]