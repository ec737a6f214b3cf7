from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text, CheckConstraint
from app.db.base_class import Base


class Job(Base):
	__tablename__ = "jobs"
	__table_args__ = (
		CheckConstraint("salary >= 0", name="ck_jobs_salary"),
		CheckConstraint("equity <= 1.0", name="ck_jobs_equity"),
	)

	id = Column(Integer, primary_key=True, index=True)
	title = Column(Text, nullable=False)
	salary = Column(Integer, nullable=True)
	equity = Column(Numeric, nullable=True)  # fixed-point, never a float column
	company_handle = Column(String(25), ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False, index=True)
