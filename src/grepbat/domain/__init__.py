"""Domain layer: value objects, exceptions, ports.

No I/O here. Everything is immutable.
"""
