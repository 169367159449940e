from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.services.enigma.rotor import RotorKind


# ============================================================================
# Machine Setup Schemas
# ============================================================================


class MachineSetup(BaseModel):
    """Per-message machine setup, the same data as a setup line."""

    rotors: list[str] = Field(min_length=2, description="Rotor names, reflector first")
    positions: str = Field(min_length=1, description="Initial rotor settings, left to right")
    rings: str | None = Field(default=None, description="Ring settings, left to right")
    plugboard: str = Field(default="", description="Plugboard in cycle notation, e.g. '(AB) (CD)'")


class RotorInfo(BaseModel):
    """A rotor available in the configured pool."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    kind: RotorKind
    notches: str
    cycles: str


# ============================================================================
# Request Schemas
# ============================================================================


class ConvertRequest(BaseModel):
    """Request schema for /encrypt and /decrypt endpoints."""

    message: str = Field(min_length=1, max_length=100_000)
    setup: MachineSetup
    config: str | None = Field(
        default=None,
        description="Machine configuration text; the server default is used when omitted",
    )
    normalize: bool = Field(
        default=False,
        description="Uppercase and drop symbols outside the alphabet before converting",
    )


class ProcessRequest(BaseModel):
    """Request schema for /process endpoint."""

    input: str = Field(min_length=1, max_length=100_000)
    config: str | None = None


# ============================================================================
# Response Schemas
# ============================================================================


class ConvertResponse(BaseModel):
    """Response schema for /encrypt and /decrypt endpoints."""

    output: str
    grouped: str
    initial_positions: str
    final_positions: str
    removed_chars: dict[str, int] = Field(
        default_factory=dict,
        description="Symbols dropped by normalization, with their counts",
    )


class ProcessResponse(BaseModel):
    """Response schema for /process endpoint."""

    lines: list[str]
    output: str


class RotorListResponse(BaseModel):
    """Response schema for /rotors endpoint."""

    alphabet: str
    num_rotors: int
    pawls: int
    rotors: list[RotorInfo]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
