"""liftlog: track lifting weights, cardio, diet and gym streaks."""

__version__ = "0.1.0"
