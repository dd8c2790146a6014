"""Unit tests for the data-access services.

Tests verify:
- Statements are assembled from the helper fragments
- Caller-owned parameters continue the placeholder numbering
- Missing rows raise NotFoundError
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Any
from unittest.mock import MagicMock

import pytest

from jobly.core.exceptions import BadRequestError, NotFoundError
from jobly.models import CompanyUpdateData, Job, JobSearchFilter, JobUpdateData
from jobly.services import CompanyService, JobService


def _normalize(query: str) -> str:
    return " ".join(query.split())


class TestJobServiceFindAll:
    """Test JobService.find_all."""

    @pytest.mark.asyncio
    async def test_no_filters(self, mock_db: MagicMock, sample_job_row: dict) -> None:
        """Test listing without filters has no WHERE clause."""
        mock_db.fetch.return_value = [{**sample_job_row, "companyName": "Watson"}]
        service = JobService(mock_db)

        jobs = await service.find_all()

        query, *params = mock_db.fetch.call_args.args
        assert "WHERE" not in query
        assert _normalize(query).endswith("ORDER BY title")
        assert params == []
        assert jobs == [Job.model_validate({**sample_job_row, "companyName": "Watson"})]

    @pytest.mark.asyncio
    async def test_filters_are_bound(self, mock_db: MagicMock) -> None:
        """Test filter values are passed as positional parameters."""
        service = JobService(mock_db)

        await service.find_all(
            JobSearchFilter(title="net", min_salary=0, has_equity=True)
        )

        query, *params = mock_db.fetch.call_args.args
        assert (
            "WHERE title ILIKE $1 AND salary >= $2 AND equity > 0 ORDER BY title"
            in _normalize(query)
        )
        assert params == ["%net%", 0]

    @pytest.mark.asyncio
    async def test_mapping_filters(self, mock_db: MagicMock) -> None:
        """Test a plain mapping of criteria is accepted."""
        service = JobService(mock_db)

        jobs = await service.find_all({"hasEquity": False})

        query, *params = mock_db.fetch.call_args.args
        assert "WHERE" not in query
        assert params == []
        assert jobs == []


    @pytest.mark.asyncio
    async def test_read_only_mapping_filters(self, mock_db: MagicMock) -> None:
        """Test a read-only mapping is accepted like a dict."""
        service = JobService(mock_db)

        await service.find_all(MappingProxyType({"minSalary": 10}))

        query, *params = mock_db.fetch.call_args.args
        assert "WHERE salary >= $1" in query
        assert params == [10]


class TestJobServiceUpdate:
    """Test JobService.update."""

    @pytest.mark.asyncio
    async def test_update_appends_id_param(
        self, mock_db: MagicMock, sample_job_row: dict[str, Any]
    ) -> None:
        """Test the id placeholder follows the SET values."""
        mock_db.fetchrow.return_value = {**sample_job_row, "salary": 120000}
        service = JobService(mock_db)

        job = await service.update(
            7, JobUpdateData(salary=120000, equity=Decimal("0.05"))
        )

        query, *params = mock_db.fetchrow.call_args.args
        normalized = _normalize(query)
        assert 'SET "salary"=$1, "equity"=$2 WHERE id = $3' in normalized
        assert normalized.startswith("UPDATE jobs")
        assert params == [120000, Decimal("0.05"), 7]
        assert job.salary == 120000

    @pytest.mark.asyncio
    async def test_update_missing_job(self, mock_db: MagicMock) -> None:
        """Test a missing job raises NotFoundError."""
        service = JobService(mock_db)

        with pytest.raises(NotFoundError) as exc_info:
            await service.update(0, JobUpdateData(title="Nope"))

        assert str(exc_info.value) == "No job: 0"
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_empty_request_propagates(self, mock_db: MagicMock) -> None:
        """Test a payload that dumps to nothing surfaces BadRequestError."""
        data = JobUpdateData.model_construct()
        service = JobService(mock_db)

        with pytest.raises(BadRequestError):
            await service.update(1, data)

        mock_db.fetchrow.assert_not_awaited()


class TestCompanyServiceUpdate:
    """Test CompanyService.update."""

    @pytest.mark.asyncio
    async def test_update_uses_column_aliases(
        self, mock_db: MagicMock, sample_company_row: dict[str, Any]
    ) -> None:
        """Test camelCase logical names are translated to columns."""
        mock_db.fetchrow.return_value = {**sample_company_row, "numEmployees": 900}
        service = CompanyService(mock_db)

        company = await service.update(
            "watson-davis", CompanyUpdateData(name="W-D", numEmployees=900)
        )

        query, *params = mock_db.fetchrow.call_args.args
        assert (
            'SET "name"=$1, "num_employees"=$2 WHERE handle = $3'
            in _normalize(query)
        )
        assert params == ["W-D", 900, "watson-davis"]
        assert company.num_employees == 900

    @pytest.mark.asyncio
    async def test_update_missing_company(self, mock_db: MagicMock) -> None:
        """Test a missing company raises NotFoundError."""
        service = CompanyService(mock_db)

        with pytest.raises(NotFoundError, match="No company: ghost"):
            await service.update("ghost", CompanyUpdateData(description=None))


class TestServiceConstruction:
    """Test dependency validation."""

    @pytest.mark.parametrize("service_cls", [JobService, CompanyService])
    def test_database_required(self, service_cls: type) -> None:
        """Test services refuse a missing database."""
        with pytest.raises(ValueError, match="Database connection required"):
            service_cls(None)
