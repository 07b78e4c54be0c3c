"""
Config class that loads the process environment, optionally seeded from .env files.
"""
import os
from abc import abstractmethod
from typing import List, Optional
import logging
from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


class BaseConfig():
    """
    Config class that snapshots the environment after loading a .env file.
    """
    def __init__(self, **overrides):
        load_dotenv(find_dotenv(usecwd=True))
        # Get all environment variables and store them in a dictionary
        self.env_vars = {key: os.getenv(key) for key in os.environ}
        self.env_vars.update({key: value for key, value in overrides.items() if value is not None})
        self.validate_env_vars()

    def get_env_vars(self) -> dict:
        """
        Return the dictionary containing all environment variables
        """
        return self.env_vars

    def get_env_var(self, var_name: str, default=None, warn: bool = True):
        """
        Retrieve the value of the specified environment variable
        Args:
            var_name (str) : Name of the env var to fetch
            default : Value returned when the var is not set
            warn (bool) : Whether to log a warning when the var is not set
        """
        if var_name in self.env_vars.keys():
            return self.env_vars[var_name]
        if warn:
            logger.warning("Variable %s not found.", var_name)
        return default

    def get_var_as_list(self, var_name: str) -> Optional[List[str]]:
        """
        Returns a comma-delimited var as list
        """
        value = self.env_vars.get(var_name)
        if value is None:
            logger.warning("Warning: var %s not found.", var_name)
            return None
        if isinstance(value, (list, tuple)):
            return list(value)
        return [env_var.strip() for env_var in str(value).split(",") if env_var.strip()]

    @abstractmethod
    def validate_env_vars(self):
        """
        Abstract method for validation of the env vars.
        """
