"""Fake data provider enum"""
from enum import Enum


class FakeDataProvider(str, Enum):
    """Fake data provider enum"""
    faker = 'faker'

    def __str__(self):
        return str(self.value)
