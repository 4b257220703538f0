"""Package default substitution tables."""
