import logging
from functools import lru_cache
from typing import Optional

from .fake_data import FakeDataService, fake_data_factory
from .models import Human


logger = logging.getLogger(__name__)

POTATO = 'potato!'


@lru_cache(maxsize=1)
def default_fake_data() -> FakeDataService:
    """Provider built once from the environment and shared by later calls."""
    return fake_data_factory.get()


class BarkingMad:
    """
    Helpers for demo and fixture data.
    """

    @staticmethod
    def potato() -> str:
        """
        Returns the fixed marker string.
        """
        return POTATO

    @staticmethod
    def random_new_human(fake_data: Optional[FakeDataService] = None) -> Human:
        """
        Builds a Human from four independent random values.

        Args:
            fake_data (FakeDataService, optional): Provider to draw values from.
                Defaults to ``default_fake_data()``.

        Returns:
            Human: first name, last name, title and country drawn in that order.
        """
        if fake_data is None:
            fake_data = default_fake_data()

        human = Human(
            first_name=fake_data.first_name(),
            last_name=fake_data.last_name(),
            title=fake_data.title(),
            country=fake_data.country()
        )
        logger.debug("Generated human %r", human)
        return human
