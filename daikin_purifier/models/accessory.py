"""
Accessory metadata shown by the presentation layer.
"""

from pydantic import BaseModel, Field

from daikin_purifier.utils.http_consts import MANUFACTURER, PLACEHOLDER


class AccessoryInformation(BaseModel):
    """Static identification plus the firmware revision read from the device."""

    manufacturer: str = Field(default=MANUFACTURER)
    model: str = Field(default=PLACEHOLDER)
    name: str = Field(default=PLACEHOLDER)
    serial_number: str = Field(default=PLACEHOLDER)
    firmware_revision: str = Field(default="")
