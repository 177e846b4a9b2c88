"""Domain layer: the pattern demonstrations and their exceptions."""
