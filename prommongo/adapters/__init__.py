"""Backend adapters for the prommongo protocols."""
