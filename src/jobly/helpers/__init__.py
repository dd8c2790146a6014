# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Pure SQL fragment builders."""

from .sql import (
    SetClause,
    WhereClause,
    quote_identifier,
    sql_for_job_filter,
    sql_for_partial_update,
)

__all__ = [
    "SetClause",
    "WhereClause",
    "quote_identifier",
    "sql_for_job_filter",
    "sql_for_partial_update",
]
