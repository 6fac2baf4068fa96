# supplyhub/services/user_service.py
from typing import List

from supplyhub.domain.schemas import Role, User, UserCreate, UserUpdate
from supplyhub.services.base import MockService
from supplyhub.utils import latency


class UserService(MockService[User]):
    create_schema = UserCreate
    update_schema = UserUpdate

    async def get_by_role(self, role: Role) -> List[User]:
        await self._wait(latency.GET_BY_FOREIGN_KEY)
        return self.collection.find_where(lambda u: u.role == role)
