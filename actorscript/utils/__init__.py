"""Utility modules for the scripting API."""

from .math_utils import *
from .errors import *
from .quaternion import Quaternion, quaternion_identity

__all__ = ['math_utils', 'errors', 'quaternion', 'logger']
