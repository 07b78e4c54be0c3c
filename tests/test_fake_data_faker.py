"""
Tests for the Faker-backed fake data service.
"""
import unittest
from unittest.mock import MagicMock, Mock, patch

from barkingmad.fake_data.base import FakeDataService
from barkingmad.fake_data.faker_service import FakerService


def make_config(locale=None, seed=None):
    config = Mock()
    config.FAKER_LOCALE = locale or ['en_US']
    config.FAKER_SEED = seed
    return config


class TestFakeDataServiceBase(unittest.TestCase):
    """Test the abstract provider capability."""

    def test_cannot_instantiate_base(self):
        with self.assertRaises(TypeError):
            FakeDataService()

    def test_abstract_operations(self):
        self.assertEqual(
            FakeDataService.__abstractmethods__,
            frozenset({'__init__', '__call__', 'first_name', 'last_name', 'title', 'country', 'name', 'email'})
        )


class TestFakerService(unittest.TestCase):
    """Test FakerService."""

    @patch('barkingmad.fake_data.faker_service.Faker')
    def test_call_configures_faker(self, mock_faker_class):
        """
        Test that calling the service builds a Faker for the configured locale.

        Verifies:
        - Faker receives the locale list
        - No seeding without a seed
        - The configured service itself is returned
        """
        service = FakerService()
        config = make_config(locale=['en_GB'])

        result = service(config=config)

        self.assertIs(result, service)
        self.assertIs(service.config, config)
        mock_faker_class.assert_called_once_with(['en_GB'])
        mock_faker_class.return_value.seed_instance.assert_not_called()

    @patch('barkingmad.fake_data.faker_service.Faker')
    def test_call_seeds_faker(self, mock_faker_class):
        service = FakerService()

        service(config=make_config(seed=0))

        mock_faker_class.return_value.seed_instance.assert_called_once_with(0)

    @patch('barkingmad.fake_data.faker_service.Faker')
    def test_operations_delegate_to_faker(self, mock_faker_class):
        """
        Test that each operation maps to the matching Faker provider.
        """
        fake = MagicMock()
        fake.first_name.return_value = 'Ada'
        fake.last_name.return_value = 'Lovelace'
        fake.prefix.return_value = 'Mrs.'
        fake.country.return_value = 'Peru'
        fake.name.return_value = 'Ada Lovelace'
        fake.email.return_value = 'ada@example.org'
        mock_faker_class.return_value = fake

        service = FakerService()(config=make_config())

        self.assertEqual(service.first_name(), 'Ada')
        self.assertEqual(service.last_name(), 'Lovelace')
        self.assertEqual(service.title(), 'Mrs.')
        self.assertEqual(service.country(), 'Peru')
        self.assertEqual(service.name(), 'Ada Lovelace')
        self.assertEqual(service.email(), 'ada@example.org')

    @patch('barkingmad.fake_data.faker_service.Faker')
    def test_faker_errors_propagate(self, mock_faker_class):
        mock_faker_class.return_value.country.side_effect = AttributeError('country')

        service = FakerService()(config=make_config())

        with self.assertRaises(AttributeError):
            service.country()

    def test_real_faker_values(self):
        service = FakerService()(config=make_config())

        for value in (service.first_name(), service.last_name(), service.title(),
                      service.country(), service.name(), service.email()):
            self.assertIsInstance(value, str)
            self.assertTrue(value)
        self.assertIn('@', service.email())

    def test_same_seed_same_values(self):
        first = FakerService()(config=make_config(seed=2024))
        values = [first.name(), first.email(), first.country()]

        second = FakerService()(config=make_config(seed=2024))

        self.assertEqual([second.name(), second.email(), second.country()], values)

    def test_logs_configuration(self):
        with self.assertLogs('barkingmad.fake_data.faker_service', level='INFO') as logs:
            FakerService()(config=make_config(locale=['en_US', 'en_GB']))

        self.assertIn('Locale: en_US, en_GB', logs.output[0])


if __name__ == '__main__':
    unittest.main()
