"""PayID resolver.

Resolves a PayID to the payment address that best matches the payment
networks and environments a client asks for via content negotiation.
"""

__version__ = "1.0.0"
