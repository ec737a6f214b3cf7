"""Job repository for job-related database operations."""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session

from app.db.sql import compile_filter, compile_partial_update, rename_keys
from app.repositories.base import BaseRepository
from app.schemas.job import JobRead
from app.services.exceptions import NotFoundError

# client field name -> storage column name
JOB_COLUMN_RENAMES: Dict[str, str] = {"companyHandle": "company_handle"}

_RETURNING = 'RETURNING "id", "title", "salary", "equity", "company_handle"'


class JobRepository(BaseRepository):
	"""Repository for Job entity operations."""

	table = "jobs"

	def __init__(self, db: Session, correlation_id: Optional[str] = None):
		super().__init__(db, correlation_id)

	def create(self, record: Mapping[str, Any]) -> JobRead:
		"""Insert a job from ``{title, salary, equity, companyHandle}``.

		``company_handle`` is accepted in place of ``companyHandle``.
		Returns the inserted row including its generated id.
		"""
		data = rename_keys(dict(record), JOB_COLUMN_RENAMES)
		rows = self._query(
			"create",
			f'''INSERT INTO jobs ("title", "salary", "equity", "company_handle")
			    VALUES ($1, $2, $3, $4)
			    {_RETURNING}''',
			[data.get("title"), data.get("salary"), data.get("equity"), data.get("company_handle")],
		)
		job = JobRead.model_validate(rows[0])
		self._log_operation("create", id=job.id, company_handle=job.company_handle)
		return job

	def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> List[JobRead]:
		"""Find all jobs, optionally narrowed by ``title``, ``minSalary``, ``hasEquity``.

		Always ordered by title.
		"""
		where_clause, values = compile_filter(filters)
		query = 'SELECT "id", "title", "salary", "equity", "company_handle" FROM jobs'
		if where_clause:
			query = f"{query} {where_clause}"
		query = f'{query} ORDER BY "title"'

		rows = self._query("find_all", query, values)
		self._log_operation("find_all", filters=list(filters or {}), count=len(rows))
		return [JobRead.model_validate(row) for row in rows]

	def get(self, job_id: int) -> JobRead:
		"""Given a job id, return the job.

		Raises:
			NotFoundError: if no job has this id
		"""
		rows = self._query(
			"get",
			'''SELECT "id", "title", "salary", "equity", "company_handle"
			   FROM jobs
			   WHERE "id" = $1''',
			[job_id],
		)
		self._log_operation("get", id=job_id, found=bool(rows))
		if not rows:
			raise NotFoundError(f"No job with id: {job_id}", correlation_id=self.correlation_id, details={"id": job_id})
		return JobRead.model_validate(rows[0])

	def update(self, job_id: int, fields: Mapping[str, Any]) -> JobRead:
		"""Partial update: only the supplied fields change.

		Keys are not checked against an allowlist here; callers validate
		them (see JobUpdate).

		Raises:
			BadRequestError: if ``fields`` is empty, before any SQL is issued
			NotFoundError: if no job has this id
		"""
		set_clause, values = compile_partial_update(fields, JOB_COLUMN_RENAMES)
		id_idx = len(values) + 1

		rows = self._query(
			"update",
			f'''UPDATE jobs
			    SET {set_clause}
			    WHERE "id" = ${id_idx}
			    {_RETURNING}''',
			[*values, job_id],
		)
		self._log_operation("update", id=job_id, fields=list(fields), found=bool(rows))
		if not rows:
			raise NotFoundError(f"No job with id: {job_id}", correlation_id=self.correlation_id, details={"id": job_id})
		return JobRead.model_validate(rows[0])

	def remove(self, job_id: int) -> None:
		"""Delete a job.

		Raises:
			NotFoundError: if no job has this id
		"""
		rows = self._query(
			"remove",
			'''DELETE
			   FROM jobs
			   WHERE "id" = $1
			   RETURNING "id"''',
			[job_id],
		)
		self._log_operation("remove", id=job_id, found=bool(rows))
		if not rows:
			raise NotFoundError(f"No job with id: {job_id}", correlation_id=self.correlation_id, details={"id": job_id})
