from fastapi import APIRouter

from app.dependencies import MachineConfigDep
from app.models.schemas import RotorInfo, RotorListResponse

router = APIRouter()


@router.get(
    "",
    response_model=RotorListResponse,
    summary="List available rotors",
    description="List the rotors in the server's default machine configuration.",
)
async def list_rotors(config: MachineConfigDep) -> RotorListResponse:
    return RotorListResponse(
        alphabet=config.alphabet,
        num_rotors=config.num_rotors,
        pawls=config.pawls,
        rotors=[RotorInfo.model_validate(spec) for spec in config.rotors],
    )
