"""isbndb_model settings and configuration"""

import os

from environs import Env


# pylint: disable=line-too-long

env = Env()
env.read_env()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

SECRET_KEY = env("SECRET_KEY", None)
DEBUG = env.bool("DEBUG", False)
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", ["*"])

INSTALLED_APPS = [
    "isbndb_model",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.path.join(BASE_DIR, env("SQLITE_DB", "isbndb_model.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"
USE_TZ = True

# isbndb.com
# The agent class does the actual talking to isbndb.com, e.g.
# "myapp.agents.ISBNDBAgent". It must implement
# isbndb_model.agents.AbstractAgent.
ISBNDB_AGENT_CLASS = env("ISBNDB_AGENT_CLASS", None)
# used by any agent that isn't given a key of its own
ISBNDB_DEFAULT_API_KEY = env("ISBNDB_DEFAULT_API_KEY", None)
# the model get_model() hands out
ISBNDB_MODEL = env("ISBNDB_MODEL", "isbndb_model.models.ISBNDBModel")
# per-site model configuration
ISBNDB = {
    "access_key": env("ISBNDB_ACCESS_KEY", None),
}

LOG_LEVEL = env("LOG_LEVEL", "INFO").upper()
# Override aspects of the default handler to our taste
# See https://docs.djangoproject.com/en/4.2/topics/logging/#default-logging-configuration
# for a reference to the defaults we're overriding
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "redact_access_key": {
            "()": "isbndb_model.utils.log.RedactAccessKey",
        },
    },
    "handlers": {
        # log to console regardless of the DEBUG setting
        "console": {
            "level": LOG_LEVEL,
            "filters": ["redact_access_key"],
            "class": "logging.StreamHandler",
        },
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
        },
        "django.utils.autoreload": {
            "level": "INFO",
        },
        "isbndb_model": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
        },
    },
}
