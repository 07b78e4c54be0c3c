"""
barkingmad: a Human value object and a fake data helper to populate it
"""

from .models import Human
from .barking_mad import BarkingMad


__all__ = [
    'Human',
    'BarkingMad'
]
