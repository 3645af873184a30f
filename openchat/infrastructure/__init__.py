"""Infrastructure layer: MongoDB (Motor) and in-memory repository implementations."""
