# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Company data-access service."""

from beartype import beartype

from ..core.database import Database
from ..core.exceptions import NotFoundError
from ..core.logging_utils import get_logger
from ..helpers.sql import sql_for_partial_update
from ..models.company import Company
from ..models.update_data import CompanyUpdateData

logger = get_logger(__name__)

# Logical (camelCase) names whose column is spelled differently.
COMPANY_COLUMN_ALIASES: dict[str, str] = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


class CompanyService:
    """Service for updating companies."""

    def __init__(self, db: Database) -> None:
        """Initialize company service with dependency validation."""
        if not db or not hasattr(db, "fetchrow"):
            raise ValueError("Database connection required and must be active")
        self._db = db

    @beartype
    async def update(self, handle: str, data: CompanyUpdateData) -> Company:
        """Partially update a company.

        Raises:
            NotFoundError: If no company has ``handle``.
        """
        clause = sql_for_partial_update(
            data.to_update_request(), COMPANY_COLUMN_ALIASES
        )
        handle_idx = len(clause.values) + 1

        query = f"""UPDATE companies
                    SET {clause.set_cols}
                    WHERE handle = ${handle_idx}
                    RETURNING handle,
                              name,
                              description,
                              num_employees AS "numEmployees",
                              logo_url AS "logoUrl"
                 """

        logger.debug("update company %s: %s", handle, clause.set_cols)
        row = await self._db.fetchrow(query, *clause.values, handle)
        if not row:
            logger.warning("update for missing company %s", handle)
            raise NotFoundError(f"No company: {handle}")

        return Company.model_validate(dict(row))
