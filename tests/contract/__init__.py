"""Contract tests.

Each port (event store, ID generator, hash generator) states its behavior once
here; fixtures parametrize every adapter that implements it.
"""
