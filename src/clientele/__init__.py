"""CLIENTELE

An event-sourced customer registry. Customer state is never stored directly;
it is derived by replaying the customer's domain events, and every change is
recorded as an immutable event.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
