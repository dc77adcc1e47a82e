"""Per-provider management clients."""
