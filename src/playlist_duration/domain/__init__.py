"""Domain types and pure duration helpers."""
