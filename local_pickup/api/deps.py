from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from local_pickup.app_shell.config import resolve_rules_path
from local_pickup.components.pickup import PickupConfig, load_config_from_rules
from local_pickup.rules.loader import load_rules
from local_pickup.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.rules_path: Path = resolve_rules_path()


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


# --- Component config ---
def get_pickup_config(rules: Rules = Depends(get_rules)) -> PickupConfig:
    return load_config_from_rules(rules.pickup)
