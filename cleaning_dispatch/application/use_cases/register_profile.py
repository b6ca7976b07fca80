"""Register profile use case."""

from cleaning_dispatch.application.commands import RegisterProfileCommand
from cleaning_dispatch.application.services.request_store_gateway import (
    RequestStoreGateway,
)
from cleaning_dispatch.domain.entities.profile import Profile
from cleaning_dispatch.domain.exceptions.validation_error import (
    DuplicateRecordError,
    ValidationError,
)


class RegisterProfileUseCase:
    """Creates the profile row for an identity issued by the auth provider."""

    def __init__(self, gateway: RequestStoreGateway):
        self.gateway = gateway

    async def execute(self, command: RegisterProfileCommand) -> Profile:
        if await self.gateway.find_profile(command.id):
            raise ValidationError(f"Profile {command.id} is already registered")
        if await self.gateway.find_profile_by_email(command.email):
            raise DuplicateRecordError(
                "register_profile", f"email {command.email} is already registered"
            )

        profile = Profile(
            id=command.id,
            email=command.email,
            full_name=command.full_name,
            role=command.role,
            phone=command.phone,
        )
        return await self.gateway.register_profile(profile)
