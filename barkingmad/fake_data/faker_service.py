import logging

from faker import Faker

from .base import FakeDataService
from .config import FakerConfig


logger = logging.getLogger(__name__)


class FakerService(FakeDataService):

    def __init__(self):
        self.faker = None

    def __call__(self, config: FakerConfig, *args, **kwargs):
        super().__call__(config)

        self.faker = Faker(self.config.FAKER_LOCALE)
        if self.config.FAKER_SEED is not None:
            self.faker.seed_instance(self.config.FAKER_SEED)

        logger.info("Faker provider configured. Locale: %s", ', '.join(self.config.FAKER_LOCALE))
        return self

    def first_name(self) -> str:
        return self.faker.first_name()

    def last_name(self) -> str:
        return self.faker.last_name()

    def title(self) -> str:
        return self.faker.prefix()

    def country(self) -> str:
        return self.faker.country()

    def name(self) -> str:
        return self.faker.name()

    def email(self) -> str:
        return self.faker.email()
