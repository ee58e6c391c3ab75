"""Application layer: queries and DTOs."""
