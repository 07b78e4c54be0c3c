import argparse
import logging
import os
from collections import OrderedDict

from dotenv import dotenv_values, find_dotenv, load_dotenv

from .barking_mad import BarkingMad
from .fake_data import fake_data_factory


class BarkingMadCli:
    DEFAULT_LOG_LEVEL = 'WARNING'

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self):
        parser = argparse.ArgumentParser(
            prog='barkingmad',
            description="Print the marker string and some random fake data."
        )
        parser.add_argument(
            '--env-files',
            type=str,
            nargs='+',
            help="Path to environment files.",
            default=[]
        )
        parser.add_argument(
            '--seed',
            type=int,
            help="Seed for reproducible fake data.",
            default=None
        )
        return parser

    def _load_from_cli_args(self, args):
        """Helper to load env vars from files specified in CLI args."""
        merged_env = []
        for env_file in args.env_files:
            if os.path.exists(env_file) and os.path.isfile(env_file):
                merged_env += list(dotenv_values(env_file).items())
            else:
                self.parser.error(f"{env_file} file not found.")
        return OrderedDict(merged_env)

    def load_env(self, args):
        """
        Load overrides for the fake data config.
        Values from --env-files win over the process environment, --seed wins over both.
        """
        merged_env = self._load_from_cli_args(args)
        if args.seed is not None:
            merged_env['FAKER_SEED'] = args.seed
        return merged_env

    def configure_logging(self, merged_env):
        level = merged_env.get('LOG_LEVEL') or os.getenv('LOG_LEVEL') or self.DEFAULT_LOG_LEVEL
        if not logging.getLogger().hasHandlers():
            try:
                logging.basicConfig(
                    level=str(level).upper(), format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            except ValueError:
                self.parser.error(f"Invalid LOG_LEVEL: {level}")

    def run(self, argv=None):
        args = self.parser.parse_args(argv)
        load_dotenv(find_dotenv(usecwd=True))
        merged_env = self.load_env(args)
        self.configure_logging(merged_env)

        fake_data = fake_data_factory.get(**merged_env)

        print(BarkingMad.potato())
        print(f"Random name: {fake_data.name()}")
        print(f"Random email: {fake_data.email()}")
        return 0


def main():
    cli = BarkingMadCli()
    return cli.run()


if __name__ == "__main__":
    raise SystemExit(main())
