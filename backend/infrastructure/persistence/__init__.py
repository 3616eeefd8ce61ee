"""Repository adapters and factories."""
