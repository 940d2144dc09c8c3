""" functionality outline for an isbndb.com api agent """
from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional


class AgentException(Exception):
    """when the agent can't do what was asked"""


class AbstractAgent(ABC):
    """the contract the model relies on to reach isbndb.com

    Agents are constructed with an api key. The class keeps a process-wide
    default key that is used when none is passed in.
    """

    _default_api_key: Optional[str] = None

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key or self.get_default_api_key()
        if not self.api_key:
            raise AgentException("An isbndb.com api key is required")

    @classmethod
    def get_default_api_key(cls) -> Optional[str]:
        """the key to use when an agent is created without one"""
        return cls._default_api_key

    @classmethod
    def set_default_api_key(cls, api_key: Optional[str]) -> None:
        """set the default key for this agent class"""
        cls._default_api_key = api_key

    @abstractmethod
    def find(self, kind: str, identifier: Any) -> Any:
        """look up a single record, returns None when there is no match"""

    @abstractmethod
    def search(self, kind: str, args: dict[str, Any]) -> Iterator[Any]:
        """an iterator over the records matching the search terms"""
