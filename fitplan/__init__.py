"""Local workout-plan store: plans, workouts, exercises and the exercise catalog."""

__version__ = "0.1.0"
