"""
CILV UI Package - Textual front end of the log viewer
"""

from .app import CILVApp, run_app

__all__ = ['CILVApp', 'run_app']
