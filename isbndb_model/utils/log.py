""" Logging utilities """
import logging
import re

KEY_PATTERN = re.compile(r"((?:access|api)_key[\"']?\s*[=:]\s*[\"']?)[^\s&\"',}]+")


class RedactAccessKey(logging.Filter):
    """
    Filter to mask isbndb.com access keys

    Agents may log the urls they request, and the key travels in the
    query string.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # leave broken records for the handler to report
            return True
        redacted = KEY_PATTERN.sub(r"\1********", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True
