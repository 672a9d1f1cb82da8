# tests/conftest.py
import logging
from unittest.mock import MagicMock

import pytest

from stack_setup.config_models import AppSettings

LARAVEL_ENV = """\
APP_NAME=Laravel
APP_ENV=local
APP_KEY=
APP_DEBUG=true
APP_URL=http://localhost

LOG_CHANNEL=stack

DB_CONNECTION=sqlite
# DB_HOST=127.0.0.1
# DB_PORT=3306
# DB_DATABASE=laravel
# DB_USERNAME=root
# DB_PASSWORD=

SESSION_DRIVER=database

REDIS_CLIENT=phpredis
REDIS_HOST=127.0.0.1
REDIS_PASSWORD=null
REDIS_PORT=6379
"""


@pytest.fixture
def app_settings(tmp_path):
    """AppSettings rooted in a temporary project directory."""
    return AppSettings(project_dir=tmp_path, warmup_seconds=0)


@pytest.fixture
def host_write_settings(tmp_path):
    """AppSettings that write generated files directly on the host."""
    return AppSettings(
        project_dir=tmp_path,
        warmup_seconds=0,
        write_files_via_container=False,
    )


@pytest.fixture
def mock_logger():
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def laravel_env():
    return LARAVEL_ENV
