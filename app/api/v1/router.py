from fastapi import APIRouter

from app.api.v1.endpoints import decrypt, encrypt, process, rotors

api_router = APIRouter()

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    process.router,
    prefix="/process",
    tags=["Processing"],
)

api_router.include_router(
    rotors.router,
    prefix="/rotors",
    tags=["Rotors"],
)
