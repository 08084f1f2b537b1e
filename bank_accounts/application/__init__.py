"""Application layer: services orchestrating domain and repositories."""
