# stack_setup/health.py
# -*- coding: utf-8 -*-
"""
One-shot reachability check of the HTTP endpoints listed in the summary.

This is a troubleshooting aid for a human; the setup run itself never
waits on it.
"""

import logging
from typing import Dict, Optional

import requests

from common.command_utils import log_setup
from stack_setup import config as static_config
from stack_setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def check_endpoint(url: str, timeout: int = static_config.HEALTH_CHECK_TIMEOUT_SECONDS) -> Optional[int]:
    """
    GET `url` once.

    Returns:
        The HTTP status code if the server answered, None otherwise.
    """
    try:
        response = requests.get(url, timeout=timeout)
    except requests.exceptions.ConnectionError as conn_err:
        module_logger.debug(f"Connection error for {url}: {conn_err}")
        return None
    except requests.exceptions.Timeout as timeout_err:
        module_logger.debug(f"Timeout for {url}: {timeout_err}")
        return None
    except requests.exceptions.RequestException as req_err:
        module_logger.debug(f"Request to {url} failed: {req_err}")
        return None
    return response.status_code


def check_endpoints(
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> Dict[str, Optional[int]]:
    """
    Check every http(s) endpoint of the summary.

    Returns:
        Endpoint label to status code, or None where nothing answered.
        Plain host:port endpoints (database, cache) are not included.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = app_settings.symbols
    results: Dict[str, Optional[int]] = {}

    for label, address in app_settings.summary.endpoints.items():
        if not address.startswith(("http://", "https://")):
            continue
        status = check_endpoint(address)
        results[label] = status
        if status is None:
            log_setup(
                f"{symbols.get('error', '❌')} {label}: {address} is not reachable",
                "error",
                logger_to_use,
                app_settings,
            )
        else:
            log_setup(
                f"{symbols.get('success', '✓')} {label}: {address} answered HTTP {status}",
                "info",
                logger_to_use,
                app_settings,
            )
    return results
