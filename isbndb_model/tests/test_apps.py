""" testing app startup """
from django.apps import apps
from django.test import TestCase, override_settings

from isbndb_model.tests.fakes import FakeAgent


class AppConfigReady(TestCase):
    """the default key is handed to the agent class"""

    def setUp(self):
        """the app config under test"""
        self.app_config = apps.get_app_config("isbndb_model")

    def tearDown(self):
        """reset the default key"""
        FakeAgent.set_default_api_key(None)

    @override_settings(ISBNDB_DEFAULT_API_KEY="DEFAULT")
    def test_ready_sets_default_key(self):
        """the configured agent gets the key"""
        self.app_config.ready()
        self.assertEqual(FakeAgent.get_default_api_key(), "DEFAULT")

    def test_ready_no_default_key(self):
        """nothing to do"""
        self.app_config.ready()
        self.assertIsNone(FakeAgent.get_default_api_key())

    @override_settings(ISBNDB_DEFAULT_API_KEY="DEFAULT", ISBNDB_AGENT_CLASS=None)
    def test_ready_no_agent_class(self):
        """a key with nowhere to go is a warning, not a crash"""
        with self.assertLogs("isbndb_model.apps", level="WARNING"):
            self.app_config.ready()
        self.assertIsNone(FakeAgent.get_default_api_key())
