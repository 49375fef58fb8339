"""
Application constants for FindClo billing service
"""

from . import app, billing
from .app import *
from .billing import *

__all__ = app.__all__ + billing.__all__
