"""
Models for barkingmad
"""

from .human import Human
