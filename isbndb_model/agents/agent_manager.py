""" find the agent class the app is configured to use """
from __future__ import annotations
import logging
from typing import Optional, Union

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from isbndb_model.agents.abstract_agent import AbstractAgent

logger = logging.getLogger(__name__)


def load_agent_class(
    path: Optional[Union[str, type[AbstractAgent]]] = None
) -> type[AbstractAgent]:
    """resolve a class, a dotted path, or the ISBNDB_AGENT_CLASS setting"""
    if path is None:
        path = getattr(settings, "ISBNDB_AGENT_CLASS", None)
    if not path:
        raise ImproperlyConfigured(
            "No isbndb agent configured, set ISBNDB_AGENT_CLASS or agent_class"
        )
    if isinstance(path, type):
        return path

    try:
        return import_string(path)  # type: ignore[no-any-return]
    except ImportError as err:
        logger.error("Unable to load isbndb agent %s: %s", path, err)
        raise ImproperlyConfigured(f"Unable to load isbndb agent {path}") from err
