"""
Host capabilities for the interaction engine
"""

from .viewport import Viewport, SimulatedViewport, Subscription
from .document_root import DocumentRoot, RootClassList

__all__ = ['Viewport', 'SimulatedViewport', 'Subscription', 'DocumentRoot', 'RootClassList']
