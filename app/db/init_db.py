"""Create the companies/jobs tables on the configured database.

Run as ``python -m app.db.init_db`` for a local database; managed
environments are expected to own their schema.
"""
import logging
from typing import Optional

from sqlalchemy.engine import Engine

from app.core.config import settings
from app.core.logging_config import sanitize_log_data, setup_logging
from app.db.base import Base

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
	if bind is None:
		from app.db.session import engine as bind
	Base.metadata.create_all(bind=bind)
	logger.info(
		"Database schema created",
		extra=sanitize_log_data({"database_url": str(bind.url), "tables": sorted(Base.metadata.tables)}),
	)


if __name__ == "__main__":
	setup_logging(settings.LOG_LEVEL)
	init_db()
