"""fleetctl — engine and fuel state for a small in-memory vehicle fleet."""

__version__ = "0.1.0"
