# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Core infrastructure components for the Jobly data-access layer."""

from .config import Settings, clear_settings_cache, get_settings
from .database import Database
from .exceptions import BadRequestError, JoblyError, NotFoundError
from .logging_utils import configure_logging, get_logger

__all__ = [
    "BadRequestError",
    "Database",
    "JoblyError",
    "NotFoundError",
    "Settings",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
    "get_settings",
]
