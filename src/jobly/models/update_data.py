# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Models for partial-update payloads.

Only the fields a caller actually supplied end up in the update request; an
explicit ``None`` is a supplied value that clears the column.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, ClassVar

from beartype import beartype
from pydantic import Field, model_validator

from .base import BaseModelConfig


@beartype
class PartialUpdateData(BaseModelConfig):
    """Shared behaviour for partial-update payloads."""

    # Columns that may be changed but never cleared.
    NON_NULLABLE: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def validate_not_empty(self) -> "PartialUpdateData":
        """Ensure at least one field is provided for update."""
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        for name in self.NON_NULLABLE:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be set to null")
        return self

    def to_update_request(self) -> Mapping[str, Any]:
        """Return supplied fields keyed by logical name, in declaration order."""
        return self.model_dump(exclude_unset=True, by_alias=True)


@beartype
class JobUpdateData(PartialUpdateData):
    """Fields of a job that may change after it is posted."""

    NON_NULLABLE: ClassVar[tuple[str, ...]] = ("title",)

    title: str | None = Field(None, min_length=1, description="Updated job title")
    salary: int | None = Field(None, ge=0, description="Updated salary")
    equity: Decimal | None = Field(
        None,
        ge=Decimal("0"),
        le=Decimal("1"),
        description="Updated equity fraction",
    )


@beartype
class CompanyUpdateData(PartialUpdateData):
    """Fields of a company that may change; keyed by camelCase when dumped."""

    NON_NULLABLE: ClassVar[tuple[str, ...]] = ("name",)

    name: str | None = Field(None, min_length=1, description="Updated name")
    description: str | None = Field(None, description="Updated description")
    num_employees: int | None = Field(
        None, alias="numEmployees", ge=0, description="Updated head count"
    )
    logo_url: str | None = Field(None, alias="logoUrl", description="Updated logo")
