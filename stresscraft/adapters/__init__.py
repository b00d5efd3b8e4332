"""Adapters connecting stresscraft to Python classes and the terminal."""
