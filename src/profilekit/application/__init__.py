"""Application layer - ports, factories, DTOs and use cases."""
