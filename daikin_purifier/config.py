"""
Configuration model for a single air purifier.
"""

from typing import Any, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from daikin_purifier.utils.http_consts import PLACEHOLDER


class PurifierConfig(BaseModel):
    """
    Connection and display settings for one purifier.

    Field aliases match the keys the home-automation host hands over
    (``refreshInterval``, ``serialNumber``); snake_case names work too.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Host address (IP or hostname)
    ip: str = Field(
        description="IP address or hostname of the purifier"
    )

    # Poll period, also the unit-info cache window
    refresh_interval: int = Field(
        default=10000,
        alias="refreshInterval",
        description="Polling interval in milliseconds"
    )

    # Per-request deadline in seconds
    timeout: float = Field(
        default=5.0,
        description="HTTP request timeout in seconds"
    )

    model: Optional[str] = Field(
        default=None,
        description="Model name shown to the user"
    )

    name: Optional[str] = Field(
        default=None,
        description="User-friendly name for the purifier"
    )

    serial_number: Optional[str] = Field(
        default=None,
        alias="serialNumber",
        description="Serial number shown to the user"
    )

    @field_validator('ip')
    @classmethod
    def validate_ip(cls, v: str) -> str:
        """Validate host format."""
        v = v.strip()
        if not v:
            raise ValueError("ip must be a non-empty IP address or hostname")
        return v

    @field_validator('refresh_interval')
    @classmethod
    def validate_refresh_interval(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("refresh_interval must be positive")
        return v

    @field_validator('timeout')
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PurifierConfig":
        """Build a config from a host-supplied dict, ignoring unknown keys."""
        known = {}
        for field_name, field in cls.model_fields.items():
            for key in (field.alias, field_name):
                if key and key in data and data[key] is not None:
                    known[field_name] = data[key]
                    break
        return cls.model_validate(known)

    @property
    def refresh_seconds(self) -> float:
        """Polling interval in seconds."""
        return self.refresh_interval / 1000

    @property
    def display_model(self) -> str:
        return self.model or PLACEHOLDER

    @property
    def display_name(self) -> str:
        return self.name or PLACEHOLDER

    @property
    def display_serial_number(self) -> str:
        return self.serial_number or PLACEHOLDER
