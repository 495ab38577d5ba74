"""
Car ownership models.

This package provides:
- Car: A named vehicle
- Owned: Single-owner handle for moving a value between scopes
- MovedError: Raised on use of a moved or released handle
- HandleState: LIVE, MOVED or RELEASED
- load_car: Read a Car from a YAML car file
"""

from .car import Car
from .owned import Owned, MovedError, HandleState
from .loader import load_car

__all__ = [
    "Car",
    "Owned",
    "MovedError",
    "HandleState",
    "load_car",
]
