from abc import ABC, abstractmethod

from src.app.repositories.audit_log_repository import IAuditLogRepository
from src.app.repositories.event_repository import IEventRepository
from src.app.repositories.person_repository import IPersonRepository
from src.app.repositories.region_repository import IRegionRepository
from src.app.repositories.source_repository import ISourceRepository
from src.app.repositories.tag_repository import ITagRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    events: IEventRepository
    regions: IRegionRepository
    sources: ISourceRepository
    people: IPersonRepository
    tags: ITagRepository
    users: IUserRepository
    audit_logs: IAuditLogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
