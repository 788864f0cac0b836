"""Constants shared across PRR modules."""
