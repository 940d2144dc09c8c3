""" bring agents into the namespace """
from .abstract_agent import AbstractAgent, AgentException
from .agent_manager import load_agent_class
