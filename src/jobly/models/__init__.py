# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Domain models package for the Jobly data-access layer.

This package exports all Pydantic domain models with strict validation
and immutability.
"""

from .base import BaseModelConfig
from .company import Company
from .job import Job, JobSearchFilter
from .update_data import CompanyUpdateData, JobUpdateData, PartialUpdateData

__all__ = [
    "BaseModelConfig",
    "Company",
    "CompanyUpdateData",
    "Job",
    "JobSearchFilter",
    "JobUpdateData",
    "PartialUpdateData",
]
