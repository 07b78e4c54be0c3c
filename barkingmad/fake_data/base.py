from abc import ABC, abstractmethod

from .config import FakeDataConfig


class FakeDataService(ABC):
    """
        Base class for fake data providers
    """
    config: FakeDataConfig

    @abstractmethod
    def __init__(self):
        pass

    @abstractmethod
    def __call__(self, config: FakeDataConfig, *args, **kwargs):
        self.config = config

    @abstractmethod
    def first_name(self) -> str:
        """
        Returns a random first name
        """
        raise NotImplementedError

    @abstractmethod
    def last_name(self) -> str:
        """
        Returns a random last name
        """
        raise NotImplementedError

    @abstractmethod
    def title(self) -> str:
        """
        Returns a random honorific, e.g. "Dr."
        """
        raise NotImplementedError

    @abstractmethod
    def country(self) -> str:
        """
        Returns a random country name
        """
        raise NotImplementedError

    @abstractmethod
    def name(self) -> str:
        """
        Returns a random full name
        """
        raise NotImplementedError

    @abstractmethod
    def email(self) -> str:
        """
        Returns a random email address
        """
        raise NotImplementedError
