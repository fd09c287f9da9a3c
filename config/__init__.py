"""Runtime configuration and sample records."""
