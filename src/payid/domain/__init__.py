"""Domain layer: PayID value objects, negotiation services and ports."""
