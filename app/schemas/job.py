from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _fixed_point(value: Any) -> Optional[str]:
	"""Render a stored numeric as a fixed-point string ("0.1", "0", "0.0000001"), never exponent form."""
	if value is None:
		return None
	if not isinstance(value, Decimal):
		# drivers without native decimals hand back floats/ints; go through repr, not binary value
		value = Decimal(str(value))
	return format(value, "f")


class JobRead(BaseModel):
	id: int
	title: str
	salary: Optional[int] = None
	equity: Optional[str] = None
	company_handle: str

	model_config = ConfigDict(from_attributes=True)

	@field_validator("equity", mode="before")
	@classmethod
	def normalize_equity(cls, v: Any) -> Optional[str]:
		return _fixed_point(v)


class JobCreate(BaseModel):
	"""Input validation for creating a job."""
	title: str = Field(..., min_length=1)
	salary: Optional[int] = Field(default=None, ge=0)
	equity: Optional[Decimal] = Field(default=None, ge=0, le=1)
	company_handle: str = Field(..., alias="companyHandle", min_length=1, max_length=25)

	model_config = ConfigDict(populate_by_name=True, extra="forbid")


class JobUpdate(BaseModel):
	"""Input validation for updating a job. id and companyHandle cannot change."""
	title: Optional[str] = Field(default=None, min_length=1)
	salary: Optional[int] = Field(default=None, ge=0)
	equity: Optional[Decimal] = Field(default=None, ge=0, le=1)

	model_config = ConfigDict(extra="forbid")

	@field_validator("title")
	@classmethod
	def title_not_null(cls, v: Optional[str]) -> str:
		if v is None:
			raise ValueError("title cannot be null")
		return v


class JobFilters(BaseModel):
	"""Query filters accepted by the job list."""
	title: Optional[str] = Field(default=None, min_length=1)
	minSalary: Optional[int] = Field(default=None, ge=0)
	hasEquity: Optional[bool] = None

	model_config = ConfigDict(extra="forbid")
