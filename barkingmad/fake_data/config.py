import logging
from typing import List, Optional

from ..config import BaseConfig
from .enums import FakeDataProvider


logger = logging.getLogger(__name__)

DEFAULT_LOCALE = 'en_US'


class Config(BaseConfig):
    """
    Settings shared by every fake data provider.

    Values come from the environment (after .env is loaded); keyword
    arguments passed to the constructor take precedence.
    """
    FAKE_DATA_PROVIDER: FakeDataProvider

    def validate_env_vars(self):
        provider = self.get_env_var('FAKE_DATA_PROVIDER', default=FakeDataProvider.faker.value, warn=False)
        try:
            self.FAKE_DATA_PROVIDER = FakeDataProvider(str(provider).strip().lower())
        except ValueError:
            raise ValueError(f'Unsupported fake data provider: {provider}')


class FakerConfig(Config):
    FAKER_LOCALE: List[str]
    FAKER_SEED: Optional[int]

    def validate_env_vars(self):
        super().validate_env_vars()

        if self.get_env_var('FAKER_LOCALE', warn=False) is None:
            self.FAKER_LOCALE = [DEFAULT_LOCALE]
        else:
            self.FAKER_LOCALE = self.get_var_as_list('FAKER_LOCALE') or [DEFAULT_LOCALE]

        seed = self.get_env_var('FAKER_SEED', warn=False)
        if seed is None or seed == '':
            self.FAKER_SEED = None
        else:
            try:
                self.FAKER_SEED = int(seed)
            except (TypeError, ValueError):
                raise ValueError(f'FAKER_SEED must be an integer, got {seed!r}')

        logger.debug("Faker config: locale=%s seed=%s", self.FAKER_LOCALE, self.FAKER_SEED)


config_classes = [
    FakerConfig
]


class FakeDataConfig(*config_classes):
    pass
