"""
CILV - CI Log Viewer

Reconstructs the suite/test sections of a CI test log, marks failing and
skipped sections and lets the user search and navigate them in a terminal UI.
"""

__version__ = "0.1.0"
