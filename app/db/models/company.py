from sqlalchemy import Column, Integer, String, Text, CheckConstraint
from app.db.base_class import Base


class Company(Base):
	__tablename__ = "companies"
	__table_args__ = (
		CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
	)

	handle = Column(String(25), primary_key=True)
	name = Column(Text, nullable=False, unique=True)
	num_employees = Column(Integer, nullable=True)
	description = Column(Text, nullable=False, default="")
	logo_url = Column(Text, nullable=True)
