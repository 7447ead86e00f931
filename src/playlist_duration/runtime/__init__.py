"""Runtime core: inspection, aggregation, readiness polling and change monitoring."""
