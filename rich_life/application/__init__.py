"""Application layer: ports, the snapshot store and use cases."""
