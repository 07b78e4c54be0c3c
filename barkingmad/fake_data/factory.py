from typing import Type, Dict, Tuple

from .enums import FakeDataProvider
from .base import FakeDataService
from .faker_service import FakerService
from .config import FakerConfig, Config


class FakeDataServiceFactory:
    """
    Registry of fake data providers.

    Each ``get`` builds a new service from its own config, so callers never
    share a provider's locale or seed.
    """
    def __init__(self):
        self._services: Dict[str, Tuple[Type[FakeDataService], Type[Config]]] = {}

    def register_service(self, key: FakeDataProvider, service: Type[FakeDataService], config: Type[Config]):
        self._services[key] = (service, config)

    def _create(self, key: FakeDataProvider, **kwargs) -> FakeDataService:
        if key not in self._services:
            raise ValueError(key)

        service_class, config_class = self._services[key]
        config = config_class(**kwargs)
        return service_class()(config=config)

    def get(self, **kwargs) -> FakeDataService:
        key = Config(**kwargs).FAKE_DATA_PROVIDER
        return self._create(key, **kwargs)


fake_data_factory = FakeDataServiceFactory()

fake_data_factory.register_service(key=FakeDataProvider.faker, service=FakerService, config=FakerConfig)
