from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

from todo_contracts.repositories import DuplicatePolicy

CONTRACT_STYLES = ("segmented", "unified")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True)
class Settings:
    duplicate_policy: DuplicatePolicy
    contract_style: str
    log_level: str
    port: int


def _choice(name: str, default: str, allowed: tuple[str, ...]) -> str:
    value = os.getenv(name, default).strip().lower()
    if value not in allowed:
        raise ValueError(f"{name} must be one of {', '.join(allowed)}; got {value!r}")
    return value


@lru_cache
def get_settings() -> Settings:
    duplicate_policy = _choice(
        "STORE_DUPLICATE_POLICY",
        DuplicatePolicy.REJECT.value,
        tuple(policy.value for policy in DuplicatePolicy),
    )
    contract_style = _choice("STORE_CONTRACT_STYLE", "segmented", CONTRACT_STYLES)
    log_level = _choice("LOG_LEVEL", "INFO", LOG_LEVELS).upper()
    raw_port = os.getenv("PORT", "8080")
    try:
        port = int(raw_port)
    except ValueError as exc:
        raise ValueError(f"PORT must be an integer; got {raw_port!r}") from exc

    return Settings(
        duplicate_policy=DuplicatePolicy(duplicate_policy),
        contract_style=contract_style,
        log_level=log_level,
        port=port,
    )
