"""
Profile routes.
"""

from fastapi import APIRouter, status

from cleaning_dispatch.api.dependencies import GatewayDep, SessionContextDep
from cleaning_dispatch.api.schemas.profile import ProfileCreateRequest, ProfileResponse
from cleaning_dispatch.application.commands import RegisterProfileCommand
from cleaning_dispatch.application.use_cases.register_profile import (
    RegisterProfileUseCase,
)
from cleaning_dispatch.config.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
async def register_profile(body: ProfileCreateRequest, gateway: GatewayDep):
    """Register the profile row for a freshly created identity."""
    command = RegisterProfileCommand(
        id=body.id,
        email=body.email,
        full_name=body.full_name,
        role=body.role,
        phone=body.phone,
    )
    profile = await RegisterProfileUseCase(gateway).execute(command)
    return ProfileResponse.from_entity(profile)


@router.get("/me", response_model=ProfileResponse)
async def get_me(context: SessionContextDep):
    return ProfileResponse.from_entity(context.profile)
