from fastapi import APIRouter

from app.api.v1.endpoints.encrypt import run_conversion
from app.dependencies import MachineConfigDep, SettingsDep
from app.models.schemas import ConvertRequest, ConvertResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=ConvertResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid setup or message"},
    },
    summary="Decrypt a message",
    description="Decrypt a message with the rotor setup it was encrypted with.",
)
async def decrypt_message(
    request: ConvertRequest,
    settings: SettingsDep,
    default_config: MachineConfigDep,
) -> ConvertResponse:
    """
    Decrypt a message.

    The machine is reciprocal: decrypting is encrypting again from the same
    initial setup.
    """
    return run_conversion(request, settings, default_config)
