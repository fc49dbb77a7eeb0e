"""
Shared fixtures.

Config tests read and write the real process environment, so every test
starts without the variables the sections look at and gets the original
environment back afterwards.
"""

import os

import pytest

from src.config import reset_config


CONFIG_PREFIXES = ('APP_', 'DB_', 'LOG_')
CONFIG_NAMES = ('DATABASE_URL', 'NODE_ENV', 'PORT', 'HOST')


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch, tmp_path):
    saved = dict(os.environ)
    for key in list(os.environ):
        if key.startswith(CONFIG_PREFIXES) or key in CONFIG_NAMES:
            del os.environ[key]
    # keep a stray .env in the checkout out of the tests
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()
    os.environ.clear()
    os.environ.update(saved)
