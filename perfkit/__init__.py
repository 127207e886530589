"""JSON document tree and node constructors, with IP type-of-service helpers and test limits."""

__version__ = "0.1.0"

__all__ = ["jsonnode", "jsonbuild", "dscp", "constants"]