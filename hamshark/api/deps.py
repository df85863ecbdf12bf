# hamshark/api/deps.py
from fastapi import Depends
from sqlalchemy.orm import Session

from hamshark.data.database import get_db
from hamshark.repos.factory import Repositories, create_repositories


def get_repositories(db: Session = Depends(get_db)) -> Repositories:
    return create_repositories(db)
