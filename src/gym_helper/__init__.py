"""gym-helper: workout tracking store and exercise analytics."""

__version__ = "0.1.0"
