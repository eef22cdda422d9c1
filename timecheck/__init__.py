"""Clock synchronization health check."""
