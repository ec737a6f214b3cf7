"""Thin positional-parameter executor on top of a SQLAlchemy session."""

import re
from typing import Any, Dict, List, Sequence

from sqlalchemy import text
from sqlalchemy.orm import Session

_PLACEHOLDER = re.compile(r"\$(\d+)")


def to_named_binds(sql: str, params: Sequence[Any]):
	"""Rewrite ``$1..$n`` placeholders as ``:p1..:pn`` and key the params to match.

	Raises:
		ValueError: if the SQL references a position with no parameter
	"""
	def _replace(match: "re.Match[str]") -> str:
		position = int(match.group(1))
		if position < 1 or position > len(params):
			raise ValueError(f"Placeholder ${position} has no bound parameter ({len(params)} given)")
		return f":p{position}"

	named_sql = _PLACEHOLDER.sub(_replace, sql)
	bind_params = {f"p{idx}": value for idx, value in enumerate(params, start=1)}
	return named_sql, bind_params


class QueryExecutor:
	"""Runs one statement per call and returns its rows as plain dicts."""

	def __init__(self, db: Session):
		self.db = db

	def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
		named_sql, bind_params = to_named_binds(sql, params)
		result = self.db.execute(text(named_sql), bind_params)
		if not result.returns_rows:
			return []
		return [dict(row) for row in result.mappings().all()]
