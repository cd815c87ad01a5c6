from thai_stock.core.repository import BaseRepository
from thai_stock.modules.users.models import User as UserModel
from thai_stock.modules.users.schemas import User


class UserRepository(BaseRepository):
    model = UserModel
    schema = User

    async def get_by_email(self, email: str) -> User | None:
        return await self.get_one_or_none(email=email)

    async def get_or_create(self, email: str) -> User:
        user = await self.get_by_email(email)
        if user:
            return user
        return await self.add(email=email)
