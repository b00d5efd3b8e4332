"""Domain models and error taxonomy for stresscraft."""
