# src/leasefee/adapters/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DISPLAY_POLICIES = ("fixed", "currency")


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------------
    # Fee display
    # -----------------------------
    # "fixed"    -> Fee: 4200.00
    # "currency" -> Fee: €4,200.00
    DISPLAY_POLICY: str = Field(default="fixed")
    FEE_LABEL: str = Field(default="Fee: ")
    CURRENCY_SYMBOL: str = Field(default="€")

    # -----------------------------
    # Form seeds
    # -----------------------------
    DEFAULT_RENT: str = Field(default="10000")
    DEFAULT_CONTRACT_LENGTH: str = Field(default="12")

    model_config = SettingsConfigDict(
        env_prefix="LEASEFEE_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("DISPLAY_POLICY", mode="before")
    @classmethod
    def _known_policy(cls, v: Any) -> Any:
        policy = str(v or "").strip().lower()
        if policy not in DISPLAY_POLICIES:
            raise ValueError(f"DISPLAY_POLICY must be one of {DISPLAY_POLICIES}")
        return policy

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return str(v or "INFO").strip().upper()


config = AppConfig()
