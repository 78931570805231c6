"""Unit tests.

No real I/O beyond temporary files; deterministic generators replace random
IDs and hashes.
"""
