"""Display-ready view models built from aggregation results."""
