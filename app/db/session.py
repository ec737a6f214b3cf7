from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings


def _connect_args(url: str) -> dict:
	# SQLite connections are shared across threads by the test client and workers
	if url.startswith("sqlite"):
		return {"check_same_thread": False}
	return {}


engine = create_engine(
	settings.DATABASE_URL,
	echo=settings.SQL_ECHO,
	connect_args=_connect_args(settings.DATABASE_URL),
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Iterator[Session]:
	db = SessionLocal()
	try:
		yield db
	finally:
		db.close()
