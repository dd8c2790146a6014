# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""
Jobly data-access helpers.

Parameterized SQL fragment builders for partial updates and job search
filters, plus the models and services that use them.
"""

__version__ = "0.1.0"

from .core.exceptions import BadRequestError, JoblyError, NotFoundError
from .helpers.sql import (
    SetClause,
    WhereClause,
    sql_for_job_filter,
    sql_for_partial_update,
)

__all__ = [
    "BadRequestError",
    "JoblyError",
    "NotFoundError",
    "SetClause",
    "WhereClause",
    "sql_for_job_filter",
    "sql_for_partial_update",
]
