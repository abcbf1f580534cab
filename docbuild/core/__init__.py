"""Domain models and errors shared across the builder."""
