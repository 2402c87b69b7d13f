"""
Change User Role Use Case

Moves a user within the VIEWER < EDITOR < ADMIN hierarchy.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import UserResponse
from src.domain.entities import UserRole


class ChangeRoleUseCase:
    """
    Use case for changing a user's role.

    Business Rules:
    - Target user must exist
    - An admin cannot demote themselves (keeps at least the acting admin)
    - Tokens already issued carry the old role claim, but access checks
      always use the role stored on the user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user_id: UUID, target_user_id: UUID, new_role: UserRole
    ) -> Result[UserResponse]:
        """
        Execute change role use case.

        Args:
            acting_user_id: Admin making the change
            target_user_id: User whose role is being changed
            new_role: Role to assign

        Returns:
            Result with the updated user, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(
                    Error("USER_NOT_FOUND", f'User with ID "{target_user_id}" not found')
                )

            if acting_user_id == target_user_id and new_role != UserRole.ADMIN:
                return Return.err(
                    Error("CANNOT_DEMOTE_SELF", "Administrators cannot demote themselves")
                )

            user.role = new_role
            user = await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(UserResponse.from_entity(user))
