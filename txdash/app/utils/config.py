"""
This module contains utility functions for loading the dashboard settings.
The settings are stored in a yaml file and are loaded using the yaml module. Every key is optional, missing keys fall
back to the defaults below. The structure of the settings file is as follows:
backend_url: http://localhost:5001
request_timeout: 30
default_month: March
log_level: INFO
log_file: /path/to/dashboard.log
"""

import os
import yaml

from dataclasses import dataclass
from txdash import CONFIG_PATH, LOG_PATH
from txdash.app.naming_conventions import DEFAULT_MONTH

CONFIG_PATH_ENV = 'TXDASH_CONFIG'
BACKEND_URL_ENV = 'TXDASH_BACKEND_URL'

DEFAULT_SETTINGS = {
    'backend_url': 'http://localhost:5001',
    'request_timeout': 30,
    'default_month': DEFAULT_MONTH,
    'log_level': 'INFO',
    'log_file': LOG_PATH,
}


@dataclass(frozen=True)
class Settings:
    backend_url: str
    request_timeout: float | None
    default_month: str
    log_level: str
    log_file: str | None


def _merge_defaults(current: dict, defaults: dict) -> dict:
    merged = dict(defaults)
    merged.update({key: value for key, value in current.items() if key in defaults})
    return merged


def load_settings(path: str | None = None) -> Settings:
    """
    Load the dashboard settings from the yaml file. A missing file means all the defaults are used.

    Parameters
    ----------
    path : str | None
        The path to the settings file. If None, the path in the `TXDASH_CONFIG` environment variable is used, and
        if it is not set the default path in the user directory.

    Returns
    -------
    Settings
        The loaded settings, with the `TXDASH_BACKEND_URL` environment variable overriding the backend url
    """
    path = path or os.environ.get(CONFIG_PATH_ENV, CONFIG_PATH)
    raw = {}
    if os.path.exists(path):
        with open(path, 'r') as file:
            try:
                raw = yaml.safe_load(file) or {}
            except yaml.YAMLError as e:
                raise ValueError(f'Could not parse the settings file {path}: {e}') from e
        if not isinstance(raw, dict):
            raise ValueError(f'The settings file {path} should contain a mapping, got {type(raw).__name__}')

    settings = _merge_defaults(raw, DEFAULT_SETTINGS)
    if os.environ.get(BACKEND_URL_ENV):
        settings['backend_url'] = os.environ[BACKEND_URL_ENV]
    settings['backend_url'] = str(settings['backend_url']).rstrip('/')
    return Settings(**settings)
