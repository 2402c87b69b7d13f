from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.audit_log_repository import AuditLogRepository
from src.adapter.repositories.event_repository import EventRepository
from src.adapter.repositories.person_repository import PersonRepository
from src.adapter.repositories.region_repository import RegionRepository
from src.adapter.repositories.source_repository import SourceRepository
from src.adapter.repositories.tag_repository import TagRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.events = EventRepository(self.session)
        self.regions = RegionRepository(self.session)
        self.sources = SourceRepository(self.session)
        self.people = PersonRepository(self.session)
        self.tags = TagRepository(self.session)
        self.users = UserRepository(self.session)
        self.audit_logs = AuditLogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
