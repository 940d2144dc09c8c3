""" testing how the agent class is found """
from django.core.exceptions import ImproperlyConfigured
from django.test import TestCase, override_settings

from isbndb_model.agents import agent_manager
from isbndb_model.tests.fakes import FakeAgent, NotAnAgent


class AgentManager(TestCase):
    """resolve the agent class"""

    def test_load_agent_class_from_settings(self):
        """the test settings name the fake agent"""
        self.assertIs(agent_manager.load_agent_class(), FakeAgent)

    def test_load_agent_class_from_path(self):
        """a dotted path"""
        self.assertIs(
            agent_manager.load_agent_class("isbndb_model.tests.fakes.NotAnAgent"),
            NotAnAgent,
        )

    def test_load_agent_class_from_class(self):
        """a class is used as it is"""
        self.assertIs(agent_manager.load_agent_class(FakeAgent), FakeAgent)

    @override_settings(ISBNDB_AGENT_CLASS=None)
    def test_load_agent_class_unconfigured(self):
        """nothing set up"""
        with self.assertRaises(ImproperlyConfigured):
            agent_manager.load_agent_class()

    def test_load_agent_class_bad_path(self):
        """a path that doesn't import"""
        with self.assertLogs("isbndb_model.agents.agent_manager", level="ERROR"):
            with self.assertRaises(ImproperlyConfigured):
                agent_manager.load_agent_class("isbndb_model.tests.fakes.Missing")
