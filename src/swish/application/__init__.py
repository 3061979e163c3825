"""Application layer: feed use cases over the domain."""
