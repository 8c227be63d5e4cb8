"""Invoice template registry and recommendation engine."""
