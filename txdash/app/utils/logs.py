import os
import logging

from txdash.app.utils.config import Settings

LOG_FORMAT = '[%(levelname)s] %(name)s: %(message)s'

# streamlit reruns the app script on every interaction, the handlers are installed once per process
_configured = False


def configure_logging(settings: Settings) -> None:
    """
    Attach a stream handler and, when a log file is set, a file handler to the root logger.
    """
    global _configured
    if _configured:
        return

    handlers = [logging.StreamHandler()]
    if settings.log_file:
        os.makedirs(os.path.dirname(os.path.abspath(settings.log_file)), exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file, mode='a'))

    root = logging.getLogger()
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(settings.log_level.upper())
    _configured = True
