"""Data loading utilities."""

from .exercise_loader import load_library_exercises, seed_exercises_from_json

__all__ = ["load_library_exercises", "seed_exercises_from_json"]
