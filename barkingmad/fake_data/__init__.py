from .config import Config, FakerConfig, FakeDataConfig
from .base import FakeDataService
from .faker_service import FakerService
from .factory import fake_data_factory
from .enums import FakeDataProvider


__all__ = [
    'Config',
    'FakerConfig',
    'FakeDataConfig',
    'FakeDataService',
    'FakerService',
    'fake_data_factory',
    'FakeDataProvider'
]
