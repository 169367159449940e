from fastapi import APIRouter, HTTPException, status

from app.api.v1.errors import bad_request
from app.core.exceptions import EnigmaError
from app.dependencies import MachineConfigDep, SettingsDep
from app.models.schemas import ConvertRequest, ConvertResponse, ErrorResponse
from app.services.enigma.config_parser import SetupDirective, parse_machine_config
from app.services.enigma.service import convert_message

router = APIRouter()


def run_conversion(
    request: ConvertRequest,
    settings: SettingsDep,
    default_config: MachineConfigDep,
) -> ConvertResponse:
    """Shared body of the encrypt and decrypt endpoints."""
    if len(request.message) > settings.max_message_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Message exceeds maximum length of {settings.max_message_length}",
        )

    try:
        config = default_config
        if request.config is not None:
            config = parse_machine_config(request.config)

        directive = SetupDirective(
            rotors=request.setup.rotors,
            setting=request.setup.positions,
            ring_setting=request.setup.rings,
            plugboard=request.setup.plugboard,
        )
        result = convert_message(
            config,
            directive,
            request.message,
            normalize=request.normalize,
            group_size=settings.output_group_size,
        )

        return ConvertResponse(
            output=result.output,
            grouped=result.grouped,
            initial_positions=result.initial_positions,
            final_positions=result.final_positions,
            removed_chars=result.removed_chars,
        )

    except EnigmaError as e:
        raise bad_request(e)


@router.post(
    "",
    response_model=ConvertResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid setup or message"},
    },
    summary="Encrypt a message",
    description="Encrypt a message with the given rotor setup.",
)
async def encrypt_message(
    request: ConvertRequest,
    settings: SettingsDep,
    default_config: MachineConfigDep,
) -> ConvertResponse:
    """
    Encrypt a message.

    A new machine is built for every request, so rotor positions never leak
    between calls.
    """
    return run_conversion(request, settings, default_config)
