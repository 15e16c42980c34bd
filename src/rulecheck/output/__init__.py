"""Output layer — render outcomes for humans or machines."""
