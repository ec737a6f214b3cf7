import os

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Settings are read on import; keep tests off any real database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from app.db.base import Base, Company
from app.repositories.job import JobRepository


TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@event.listens_for(test_engine, "connect")
def _enable_foreign_keys(dbapi_connection, _record):
    dbapi_connection.execute("PRAGMA foreign_keys=ON")


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=test_engine)
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def job_repo(db):
    return JobRepository(db=db)


@pytest.fixture
def seeded(db, job_repo):
    """Three companies and three jobs; returns job ids keyed by title."""
    db.add_all([
        Company(handle="c1", name="C1", num_employees=1, description="Desc1"),
        Company(handle="c2", name="C2", num_employees=2, description="Desc2"),
        Company(handle="c3", name="C3", num_employees=3, description="Desc3"),
    ])
    db.flush()

    jobs = [
        {"title": "junior data analyst", "salary": 100000, "equity": 0, "companyHandle": "c2"},
        {"title": "senior software developer", "salary": 200000, "equity": 0.5, "companyHandle": "c1"},
        {"title": "software developer", "salary": 100000, "equity": None, "companyHandle": "c1"},
    ]
    ids = {job["title"]: job_repo.create(job).id for job in jobs}
    db.commit()
    return ids
