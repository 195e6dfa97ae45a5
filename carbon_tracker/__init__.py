"""
Carbon footprint tracker.

Daily transportation, energy and waste logging with derived emission
estimates, persisted to a local JSON file.
"""

__version__ = "1.0.0"
