"""Domain logic for WeightLog."""
