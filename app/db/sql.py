"""Helpers that turn sparse client input into parameterized SQL fragments.

Both compilers emit ``$n`` positional placeholders and return the bound values
separately; values are never spliced into the SQL text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional

from app.services.exceptions import BadRequestError


class PartialUpdate(NamedTuple):
	set_clause: str
	values: List[Any]


class FilterClause(NamedTuple):
	where_clause: str
	values: List[Any]


def compile_partial_update(fields: Mapping[str, Any], rename: Mapping[str, str]) -> PartialUpdate:
	"""Build the SET clause of a single-row UPDATE.

	Args:
		fields: client field name -> new value. Key order decides both the
			fragment order and the placeholder numbering.
		rename: client field name -> storage column name, for the fields
			whose names differ between the two.

	Returns:
		PartialUpdate, e.g. for ``{"firstName": "Aliya", "age": 32}`` with
		``{"firstName": "first_name"}``:
		``('"first_name"=$1, "age"=$2', ["Aliya", 32])``

	Raises:
		BadRequestError: if ``fields`` is empty
	"""
	if not fields:
		raise BadRequestError("No data")

	cols = [
		f'"{rename.get(name, name)}"=${idx}'
		for idx, name in enumerate(fields, start=1)
	]
	return PartialUpdate(set_clause=", ".join(cols), values=list(fields.values()))


LIKE_ESCAPE = "!"


def _title_pattern(value: Any) -> str:
	"""Lowercased substring pattern; ``%`` and ``_`` in the value match literally."""
	text = str(value).lower()
	for char in (LIKE_ESCAPE, "%", "_"):
		text = text.replace(char, LIKE_ESCAPE + char)
	return f"%{text}%"


def _equity_threshold(flag: Any) -> Optional[int]:
	# only "has equity" narrows the result; False means no restriction
	return 0 if flag else None


class JobFilter(Enum):
	"""Recognized list filters: name -> (comparison template, value normalizer)."""

	TITLE = ("title", "LOWER(\"title\") LIKE {} ESCAPE '!'", _title_pattern)
	MIN_SALARY = ("minSalary", '"salary" >= {}', lambda value: value)
	HAS_EQUITY = ("hasEquity", '"equity" > {}', _equity_threshold)

	def __init__(self, param: str, template: str, normalize: Callable[[Any], Any]):
		self.param = param
		self.template = template
		self.normalize = normalize

	@classmethod
	def from_param(cls, name: str) -> "JobFilter":
		for member in cls:
			if member.param == name:
				return member
		raise BadRequestError(
			f"Unrecognized filter: {name}",
			details={"filter": name, "allowed": [m.param for m in cls]},
		)


def compile_filter(filters: Optional[Mapping[str, Any]], start: int = 1) -> FilterClause:
	"""Build a conjunctive WHERE clause for the job list query.

	The first applied filter opens with WHERE, each later one with AND.
	Filters set to None (or normalizing to None) are skipped. An empty
	or missing mapping gives an empty clause.

	Raises:
		BadRequestError: for a filter name outside ``JobFilter``
	"""
	if not filters:
		return FilterClause(where_clause="", values=[])

	conditions: List[str] = []
	values: List[Any] = []
	for name, raw in filters.items():
		job_filter = JobFilter.from_param(name)
		if raw is None:
			continue
		value = job_filter.normalize(raw)
		if value is None:
			continue
		values.append(value)
		conditions.append(job_filter.template.format(f"${start + len(values) - 1}"))

	if not conditions:
		return FilterClause(where_clause="", values=[])
	return FilterClause(where_clause="WHERE " + " AND ".join(conditions), values=values)


def rename_keys(data: Dict[str, Any], rename: Mapping[str, str]) -> Dict[str, Any]:
	"""Return ``data`` with client names replaced by storage column names."""
	return {rename.get(key, key): value for key, value in data.items()}
