# Import all the models, so that Base has them before being
# imported by Alembic or by test suites calling create_all
from app.db.base_class import Base  # noqa: F401
from app.db.models.company import Company  # noqa: F401
from app.db.models.job import Job  # noqa: F401
