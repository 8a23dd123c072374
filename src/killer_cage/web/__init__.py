"""HTTP adapter for the cage engine."""
