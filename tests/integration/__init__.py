"""Integration tests.

Exercise the in-memory adapters and the bootstrap wiring together, with
configuration taken from the environment.
"""
