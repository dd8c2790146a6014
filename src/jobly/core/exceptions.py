# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Error types shared by the helpers, models and services.

Every error carries an HTTP-style status code so an outer surface can shape
a response without knowing which layer raised it.
"""

from typing import Any

from beartype import beartype


class JoblyError(Exception):
    """Base error for the data-access layer."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize error with message and optional status override."""
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    @beartype
    def to_dict(self) -> dict[str, Any]:
        """Convert to an error response body."""
        return {"error": {"message": self.message, "status": self.status_code}}


class BadRequestError(JoblyError):
    """Caller supplied input that cannot be turned into a statement."""

    status_code = 400

    def __init__(self, message: str = "Bad Request") -> None:
        """Initialize bad request error."""
        super().__init__(message)


class NotFoundError(JoblyError):
    """Targeted row does not exist."""

    status_code = 404

    def __init__(self, message: str = "Not Found") -> None:
        """Initialize not found error."""
        super().__init__(message)
