""" testing the agent contract """
from django.test import TestCase

from isbndb_model.agents import AbstractAgent, AgentException
from isbndb_model.tests.fakes import FakeAgent


class AbstractAgentTests(TestCase):
    """what every agent gets for free"""

    def tearDown(self):
        """reset the default key"""
        FakeAgent.set_default_api_key(None)

    def test_init_with_key(self):
        """the key is kept"""
        agent = FakeAgent(api_key="K1")
        self.assertEqual(agent.api_key, "K1")

    def test_init_default_key(self):
        """no key given, use the default"""
        FakeAgent.set_default_api_key("DEFAULT")
        self.assertEqual(FakeAgent.get_default_api_key(), "DEFAULT")
        self.assertEqual(FakeAgent().api_key, "DEFAULT")

    def test_init_no_key(self):
        """no key anywhere"""
        self.assertIsNone(FakeAgent.get_default_api_key())
        with self.assertRaises(AgentException):
            FakeAgent()

    def test_default_key_per_class(self):
        """setting one class's default leaves the base alone"""
        FakeAgent.set_default_api_key("DEFAULT")
        self.assertIsNone(AbstractAgent.get_default_api_key())

    def test_abstract(self):
        """find and search have to be filled in"""

        class HalfAgent(AbstractAgent):
            """only finds"""

            def find(self, kind, identifier):
                return None

        with self.assertRaises(TypeError):
            HalfAgent(api_key="K1")  # pylint: disable=abstract-class-instantiated
