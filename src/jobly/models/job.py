# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Job domain models.

Jobs belong to a company (``company_handle``) and are listed through an
optional search filter whose three criteria are independent of each other.
"""

from decimal import Decimal

from beartype import beartype
from pydantic import ConfigDict, Field

from .base import BaseModelConfig


@beartype
class Job(BaseModelConfig):
    """A job row as returned by the job queries."""

    id: int = Field(..., ge=1, description="Job primary key")
    title: str = Field(..., min_length=1, description="Job title")
    salary: int | None = Field(None, ge=0, description="Yearly salary")
    equity: Decimal | None = Field(
        None,
        ge=Decimal("0"),
        le=Decimal("1"),
        description="Fraction of company equity offered",
    )
    company_handle: str = Field(
        ..., alias="companyHandle", min_length=1, description="Owning company"
    )
    company_name: str | None = Field(
        None, alias="companyName", description="Owning company name, when joined"
    )


@beartype
class JobSearchFilter(BaseModelConfig):
    """Optional criteria for listing jobs.

    ``None`` means the criterion is absent. ``min_salary=0`` is a real lower
    bound and ``has_equity=False`` means "regardless of equity", not
    "without equity". The title is bound exactly as given, whitespace
    included, and only a literal boolean ``True`` turns the equity filter on.
    """

    model_config = ConfigDict(str_strip_whitespace=False)

    title: str | None = Field(
        None, description="Case-insensitive substring of the job title"
    )
    min_salary: int | None = Field(
        None, alias="minSalary", description="Inclusive salary lower bound"
    )
    has_equity: bool | None = Field(
        None,
        alias="hasEquity",
        strict=True,
        description="When true, only jobs offering a non-zero equity",
    )
