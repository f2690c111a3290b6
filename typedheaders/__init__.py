"""Strongly typed HTTP headers with decoding, encoding and a typed header map."""

__version__ = "0.3.8"

__all__ = [
    "core",
    "headermap",
    "flat_csv",
    "entity",
    "http_date",
    "seconds",
    "value_string",
    "headers",
]