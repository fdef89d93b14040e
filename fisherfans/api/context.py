from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from ..auth import Identity, get_optional_identity
from ..database import get_db
from ..domain.container import ServiceContainer


class FisherFansContext(BaseContext):
    """Per-request GraphQL context: session, caller and wired services"""

    def __init__(self, db: Session, identity: Optional[Identity]):
        super().__init__()
        self.db = db
        self.identity = identity
        self.services = ServiceContainer(db)


async def get_context(
    db: Session = Depends(get_db),
    identity: Optional[Identity] = Depends(get_optional_identity),
) -> FisherFansContext:
    return FisherFansContext(db, identity)
