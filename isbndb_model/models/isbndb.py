""" a model for looking things up on isbndb.com """
from __future__ import annotations
from enum import Enum
import logging
import threading
from typing import Any, Iterator, Optional

from django.conf import settings

from isbndb_model.agents import agent_manager
from isbndb_model.agents.abstract_agent import AbstractAgent

logger = logging.getLogger(__name__)


class ResourceKind(Enum):
    """the kinds of record isbndb.com serves, by the name the agent knows"""

    AUTHOR = "Authors"
    BOOK = "Books"
    CATEGORY = "Categories"
    PUBLISHER = "Publishers"
    SUBJECT = "Subjects"

    @property
    def tag(self) -> str:
        """used to name the find_ operations"""
        return self.name.lower()

    @property
    def plural(self) -> str:
        """used to name the search_ operations"""
        return self.value.lower()


class ISBNDBModel:
    """Provide access to isbndb.com from within the app.

    Subclasses can set ``config`` the way they would configure any other
    component; the ``ISBNDB`` setting and keyword arguments to the
    constructor are layered on top of it:

        class BookLookup(ISBNDBModel):
            config = {"access_key": "XXX"}

        book = BookLookup().find_book(isbn)

    The agent that does the actual work is created the first time it is
    needed, and shared by every call made against this instance afterwards.
    """

    config: dict[str, Any] = {}

    def __init__(self, **config: Any):
        self.config = self.build_config(**config)
        self._agent_lock = threading.Lock()

    @classmethod
    def build_config(cls, **config: Any) -> dict[str, Any]:
        """class config, then site settings, then whatever was passed in"""
        site_config = getattr(settings, "ISBNDB", None) or {}
        merged = dict(cls.config)
        merged.update({k: v for k, v in site_config.items() if v is not None})
        merged.update(config)
        merged.setdefault("agent", None)
        return merged

    def find(self, kind: ResourceKind, identifier: Any) -> Any:
        """Find a single record of the given kind. Returns the matching
        object, or None if there isn't one. Errors from the agent are not
        caught."""
        return self.get_agent().find(kind.value, identifier)

    def search(self, kind: ResourceKind, args: dict[str, Any]) -> Iterator[Any]:
        """Search for records of the given kind. The valid search terms are
        whatever the agent supports for that kind. Returns the agent's
        iterator."""
        return self.get_agent().search(kind.value, args)

    def find_author(self, author_id: Any) -> Any:
        """look up an author by id"""
        return self.find(ResourceKind.AUTHOR, author_id)

    def find_book(self, book_id: Any) -> Any:
        """look up a book by id or ISBN"""
        return self.find(ResourceKind.BOOK, book_id)

    def find_category(self, category_id: Any) -> Any:
        """look up a category by id"""
        return self.find(ResourceKind.CATEGORY, category_id)

    def find_publisher(self, publisher_id: Any) -> Any:
        """look up a publisher by id"""
        return self.find(ResourceKind.PUBLISHER, publisher_id)

    def find_subject(self, subject_id: Any) -> Any:
        """look up a subject by id"""
        return self.find(ResourceKind.SUBJECT, subject_id)

    def search_authors(self, args: dict[str, Any]) -> Iterator[Any]:
        """search for authors"""
        return self.search(ResourceKind.AUTHOR, args)

    def search_books(self, args: dict[str, Any]) -> Iterator[Any]:
        """search for books"""
        return self.search(ResourceKind.BOOK, args)

    def search_categories(self, args: dict[str, Any]) -> Iterator[Any]:
        """search for categories"""
        return self.search(ResourceKind.CATEGORY, args)

    def search_publishers(self, args: dict[str, Any]) -> Iterator[Any]:
        """search for publishers"""
        return self.search(ResourceKind.PUBLISHER, args)

    def search_subjects(self, args: dict[str, Any]) -> Iterator[Any]:
        """search for subjects"""
        return self.search(ResourceKind.SUBJECT, args)

    def get_agent(self) -> AbstractAgent:
        """Get the agent from the config, allocating one the first time
        through"""
        config = self.config
        agent: Optional[AbstractAgent] = config.get("agent")
        if agent is not None:
            return agent

        with self._agent_lock:
            # another thread may have got here first
            agent = config.get("agent")
            if agent is None:
                agent = self.allocate_agent(config)
        return agent

    def allocate_agent(self, config: dict[str, Any]) -> AbstractAgent:
        """Create an agent, store it on the config and return it. The key
        comes from the config if there is one there, otherwise from the
        agent class's default."""
        agent_class = agent_manager.load_agent_class(config.get("agent_class"))
        key = config.get("access_key") or agent_class.get_default_api_key()

        logger.debug(
            "Allocating %s agent for %s", agent_class.__name__, type(self).__name__
        )
        config["agent"] = agent_class(api_key=key)
        return config["agent"]
