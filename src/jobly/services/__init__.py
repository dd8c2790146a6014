# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Data-access service layer."""

from .company_service import COMPANY_COLUMN_ALIASES, CompanyService
from .job_service import JobService

__all__ = [
    "COMPANY_COLUMN_ALIASES",
    "CompanyService",
    "JobService",
]
