"""
Create all tables from the ORM metadata. Run from project root:
  python -m app.scripts.init_db
Existing tables are left untouched.
"""
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from app.core.database import engine
from app.models import Base

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.exception("Table creation failed: %s", e)
        return 1
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
