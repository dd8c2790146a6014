# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Company domain model."""

from beartype import beartype
from pydantic import Field

from .base import BaseModelConfig


@beartype
class Company(BaseModelConfig):
    """A company row as returned by the company queries."""

    handle: str = Field(..., min_length=1, max_length=25, description="Company key")
    name: str = Field(..., min_length=1, description="Display name")
    description: str | None = Field(None, description="Free-form description")
    num_employees: int | None = Field(
        None, alias="numEmployees", ge=0, description="Head count"
    )
    logo_url: str | None = Field(None, alias="logoUrl", description="Logo location")
