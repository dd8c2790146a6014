# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Job data-access service.

Executes the statements assembled from ``jobly.helpers.sql`` fragments.
"""

from collections.abc import Mapping
from typing import Any

from beartype import beartype

from ..core.database import Database
from ..core.exceptions import NotFoundError
from ..core.logging_utils import get_logger
from ..helpers.sql import sql_for_job_filter, sql_for_partial_update
from ..models.job import Job, JobSearchFilter
from ..models.update_data import JobUpdateData

logger = get_logger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


class JobService:
    """Service for listing and updating jobs."""

    def __init__(self, db: Database) -> None:
        """Initialize job service with dependency validation."""
        if not db or not hasattr(db, "fetch"):
            raise ValueError("Database connection required and must be active")
        self._db = db

    @beartype
    async def find_all(
        self,
        filters: JobSearchFilter | Mapping[str, Any] | None = None,
    ) -> list[Job]:
        """List jobs with their company name, ordered by title.

        Optional search filters:
            title - case-insensitive, matches any part of the title
            min_salary - only jobs paying at least this much
            has_equity - when true, only jobs offering non-zero equity;
                when false or absent, jobs are listed regardless of equity
        """
        clause = sql_for_job_filter(filters)

        query = (
            """SELECT j.id,
                      j.title,
                      j.salary,
                      j.equity,
                      j.company_handle AS "companyHandle",
                      c.name AS "companyName"
               FROM jobs j LEFT JOIN companies AS c ON c.handle = j.company_handle"""
            + clause.where
            + " ORDER BY title"
        )

        logger.debug("find_all jobs: %s %r", query, clause.values)
        rows = await self._db.fetch(query, *clause.values)
        return [Job.model_validate(dict(row)) for row in rows]

    @beartype
    async def update(self, job_id: int, data: JobUpdateData) -> Job:
        """Partially update a job; only supplied fields change.

        Raises:
            NotFoundError: If no job has ``job_id``.
        """
        clause = sql_for_partial_update(data.to_update_request(), {})
        id_idx = len(clause.values) + 1

        query = f"""UPDATE jobs
                    SET {clause.set_cols}
                    WHERE id = ${id_idx}
                    RETURNING {JOB_COLUMNS}"""

        logger.debug("update job %s: %s", job_id, clause.set_cols)
        row = await self._db.fetchrow(query, *clause.values, job_id)
        if not row:
            logger.warning("update for missing job %s", job_id)
            raise NotFoundError(f"No job: {job_id}")

        return Job.model_validate(dict(row))
