from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.services.enigma.config_parser import MachineConfig, load_machine_config, parse_machine_config
from app.services.enigma.presets import NAVAL_CONFIG


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache
def _default_config(path: str | None) -> MachineConfig:
    if path:
        return load_machine_config(path)
    return parse_machine_config(NAVAL_CONFIG)


# Default machine configuration dependency
def get_machine_config(settings: SettingsDep) -> MachineConfig:
    """Get the server's default machine configuration."""
    return _default_config(settings.machine_config_path)

MachineConfigDep = Annotated[MachineConfig, Depends(get_machine_config)]
