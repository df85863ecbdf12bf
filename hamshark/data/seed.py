# hamshark/data/seed.py
from hamshark.data.database import Base, SessionLocal, engine
from hamshark.data.models import MenuItemModel
from hamshark.repos.factory import create_sql_repositories, seed
from hamshark.utils.logging import get_logger

logger = get_logger(__name__)


def init_db() -> None:
    """Create the tables and load the demo data into an empty database."""
    logger.info(f"Tables registered: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise

    db = SessionLocal()
    try:
        # not forcing: only seed if empty
        if db.query(MenuItemModel).first():
            return
        seed(create_sql_repositories(db))
        logger.info("Sample data loaded")
    finally:
        db.close()


if __name__ == "__main__":
    init_db()
