from fastapi import APIRouter, HTTPException, status

from app.api.v1.errors import bad_request
from app.core.exceptions import EnigmaError
from app.dependencies import MachineConfigDep, SettingsDep
from app.models.schemas import ErrorResponse, ProcessRequest, ProcessResponse
from app.services.enigma.config_parser import parse_machine_config
from app.services.enigma.service import process_document

router = APIRouter()


@router.post(
    "",
    response_model=ProcessResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid configuration or input"},
    },
    summary="Process an input document",
    description=(
        "Run a document of setup lines (starting with '*') and message lines "
        "through a machine, returning one output line per input line."
    ),
)
async def process_input(
    request: ProcessRequest,
    settings: SettingsDep,
    default_config: MachineConfigDep,
) -> ProcessResponse:
    """Process a whole input document, as the command-line tool does."""
    if len(request.input) > settings.max_message_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Input exceeds maximum length of {settings.max_message_length}",
        )

    try:
        config = default_config
        if request.config is not None:
            config = parse_machine_config(request.config)

        lines = process_document(config, request.input, settings.output_group_size)
        output = "\n".join(lines) + "\n" if lines else ""
        return ProcessResponse(lines=lines, output=output)

    except EnigmaError as e:
        raise bad_request(e)
