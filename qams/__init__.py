"""
QAMS — Quality Assurance Management System
==========================================
Scores QA reviews against weighted scorecards. A scorecard is a set of
criteria, each with mutually exclusive answer options worth a number of
points or marked FATAL. Scorecards are imported from CSV and completed
reviews are exported back to CSV.
"""

__version__ = "0.1.0"
