"""VitaSync: workout log, meal plan and recipe library with JSON persistence."""

__version__ = "0.1.0"
