# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""SQL fragment builders for partial updates and job search filters.

Both builders are pure: they return a fragment plus its bound values and
never touch the database. Placeholders are PostgreSQL positional markers
(``$1``, ``$2``, ...) numbered from 1 within the fragment; callers that
append their own parameters continue from ``len(values) + 1``.
"""

from collections.abc import Mapping
from typing import Any

from attrs import field, frozen
from beartype import beartype

from ..core.exceptions import BadRequestError
from ..models.job import JobSearchFilter


@frozen
class SetClause:
    """Assignments for an UPDATE statement and their bound values."""

    set_cols: str = field()
    values: tuple[Any, ...] = field(converter=tuple)


@frozen
class WhereClause:
    """A WHERE fragment (empty when nothing filters) and its bound values."""

    where: str = field()
    values: tuple[Any, ...] = field(converter=tuple)


@beartype
def quote_identifier(name: str) -> str:
    """Quote an identifier so mixed case and reserved words survive."""
    return '"' + name.replace('"', '""') + '"'


@beartype
def sql_for_partial_update(
    data: Mapping[str, Any],
    js_to_sql: Mapping[str, str] | None = None,
) -> SetClause:
    """Build the SET clause of a partial UPDATE.

    Args:
        data: Logical field names mapped to their new values. Key order
            decides both the assignment order and the parameter order.
        js_to_sql: Logical names mapped to column names, only for names that
            differ from their column. Unlisted keys are used as-is.

    Returns:
        SetClause whose ``values`` line up with ``$1..$n`` in ``set_cols``.

    Raises:
        BadRequestError: If ``data`` is empty.

    Examples:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
        ...                        {"firstName": "first_name"})
        SetClause(set_cols='"first_name"=$1, "age"=$2', values=('Aliya', 32))
    """
    if not data:
        raise BadRequestError("No data")

    js_to_sql = js_to_sql or {}
    cols = [
        f"{quote_identifier(js_to_sql.get(name, name))}=${idx}"
        for idx, name in enumerate(data, start=1)
    ]

    return SetClause(set_cols=", ".join(cols), values=data.values())


# Predicate templates in the order they are applied.
TITLE_PREDICATE = "title ILIKE ${}"
MIN_SALARY_PREDICATE = "salary >= ${}"
HAS_EQUITY_PREDICATE = "equity > 0"


@beartype
def sql_for_job_filter(
    filters: JobSearchFilter | Mapping[str, Any] | None = None,
) -> WhereClause:
    """Build the WHERE fragment for listing jobs.

    Criteria are combined with AND, always in the order title, minimum
    salary, equity. A missing criterion adds nothing; ``min_salary=0`` still
    filters, and ``has_equity`` only filters when it is exactly ``True``.

    Raises:
        pydantic.ValidationError: If a mapping carries unknown keys or values
            of the wrong type.
    """
    if filters is None:
        return WhereClause(where="", values=())
    if not isinstance(filters, JobSearchFilter):
        filters = JobSearchFilter.model_validate(dict(filters))

    wheres: list[str] = []
    values: list[Any] = []

    if filters.title:
        values.append(f"%{filters.title}%")
        wheres.append(TITLE_PREDICATE.format(len(values)))

    if filters.min_salary is not None:
        values.append(filters.min_salary)
        wheres.append(MIN_SALARY_PREDICATE.format(len(values)))

    if filters.has_equity is True:
        wheres.append(HAS_EQUITY_PREDICATE)

    if not wheres:
        return WhereClause(where="", values=())

    return WhereClause(where=" WHERE " + " AND ".join(wheres), values=values)
