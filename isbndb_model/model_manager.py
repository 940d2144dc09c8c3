""" hand the app the model it is configured to use """
from functools import lru_cache
import logging

from django.conf import settings
from django.utils.module_loading import import_string

from isbndb_model.models import ISBNDBModel

logger = logging.getLogger(__name__)


def load_model(path: str) -> ISBNDBModel:
    """instantiate the model class"""
    model_class = import_string(path)
    logger.debug("Loading isbndb model %s", path)
    return model_class()  # type: ignore[no-any-return]


@lru_cache(maxsize=None)
def get_model() -> ISBNDBModel:
    """one model, and so one agent, for the whole process"""
    return load_model(
        getattr(settings, "ISBNDB_MODEL", "isbndb_model.models.ISBNDBModel")
    )
