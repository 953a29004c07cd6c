"""
CILV UI Views Package
"""

from .log_viewer import LogViewerView

__all__ = [
    'LogViewerView'
]
