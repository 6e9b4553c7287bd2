"""Testing utilities for StudentQuiz applications."""
