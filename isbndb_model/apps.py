"""Do further startup configuration and initialization"""

import logging

from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class IsbndbModelConfig(AppConfig):
    """Handles additional configuration"""

    name = "isbndb_model"
    verbose_name = "isbndb.com"

    def ready(self):
        """give the agent class its default key, if one is configured"""
        # pylint: disable=import-outside-toplevel
        from isbndb_model.agents import agent_manager

        default_key = getattr(settings, "ISBNDB_DEFAULT_API_KEY", None)
        if not default_key:
            return

        try:
            agent_class = agent_manager.load_agent_class()
        except ImproperlyConfigured:
            logger.warning(
                "ISBNDB_DEFAULT_API_KEY is set but there is no agent class to use it"
            )
            return

        logger.debug("Setting default api key for %s", agent_class.__name__)
        agent_class.set_default_api_key(default_key)
