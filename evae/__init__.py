# This project was developed with assistance from AI tools.
"""EVΛƎ Framework: mortgage pre-screening demo built around a deterministic Policy Gate."""
