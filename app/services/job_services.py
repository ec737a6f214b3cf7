from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from app.services.base import BaseService
from app.services.exceptions import BadRequestError
from app.repositories.job import JobRepository
from app.schemas.job import JobCreate, JobFilters, JobRead, JobUpdate

SchemaType = TypeVar("SchemaType", bound=BaseModel)


class JobService(BaseService):
	"""Validates job input and runs repository calls inside a transaction."""

	def __init__(self, job_repo: JobRepository, correlation_id: Optional[str] = None):
		super().__init__(correlation_id)
		self.job_repo = job_repo

	def _validate(self, schema: Type[SchemaType], data: Any) -> SchemaType:
		if isinstance(data, schema):
			return data
		try:
			return schema.model_validate(data or {})
		except PydanticValidationError as e:
			errors = e.errors()
			first = errors[0] if errors else {}
			field = ".".join(str(p) for p in first.get("loc", ())) or None
			raise BadRequestError(
				f"Invalid {schema.__name__}: {first.get('msg', str(e))}",
				correlation_id=self.correlation_id,
				details={"field": field, "errors": [err.get("msg") for err in errors]},
			)

	def create_job(self, data: JobCreate | Dict[str, Any], db: Session) -> JobRead:
		payload = self._validate(JobCreate, data)
		self.log_operation("create_job_attempt", company_handle=payload.company_handle)
		record = payload.model_dump(mode="json")
		return self.run_in_transaction(db, lambda: self.job_repo.create(record))

	def list_jobs(self, filters: JobFilters | Dict[str, Any] | None = None) -> List[JobRead]:
		query = self._validate(JobFilters, filters)
		applied = query.model_dump(exclude_none=True)
		self.log_operation("list_jobs", filters=list(applied))
		return self.run(lambda: self.job_repo.find_all(applied))

	def get_job(self, job_id: int) -> JobRead:
		return self.run(lambda: self.job_repo.get(job_id))

	def update_job(self, job_id: int, data: JobUpdate | Dict[str, Any], db: Session) -> JobRead:
		payload = self._validate(JobUpdate, data)
		# unset fields stay untouched; explicit nulls are kept
		fields = payload.model_dump(mode="json", exclude_unset=True)
		self.log_operation("update_job_attempt", job_id=job_id, fields=list(fields))
		return self.run_in_transaction(db, lambda: self.job_repo.update(job_id, fields))

	def delete_job(self, job_id: int, db: Session) -> None:
		self.log_operation("delete_job_attempt", job_id=job_id)
		self.run_in_transaction(db, lambda: self.job_repo.remove(job_id))
