"""Source package for WeightLog."""
