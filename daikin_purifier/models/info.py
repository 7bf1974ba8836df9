"""
Models for the records returned by the purifier.

The appliance only ever speaks in flat string mappings.  These models give
names to the fields the bridge actually uses and keep the full record in
``raw`` for everything else.
"""

from typing import Dict, Optional
from pydantic import BaseModel, Field

from daikin_purifier.protocol.parser import RawRecord, decode_nested


def _is_one(value: Optional[str]) -> bool:
    """Match the appliance's numeric flags, so ``"1"`` and ``"01"`` both count."""
    if value is None:
        return False
    try:
        return float(value) == 1
    except ValueError:
        return False


class BasicInfo(BaseModel):
    """Model for ``/common/basic_info`` (firmware and model metadata)."""

    ret: Optional[str] = None
    type: Optional[str] = None
    reg: Optional[str] = None
    ver: Optional[str] = None
    rev: Optional[str] = None
    name: Optional[str] = None
    mac: Optional[str] = None

    raw: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: RawRecord) -> "BasicInfo":
        """
        Create a BasicInfo from a decoded response.

        Args:
            record: The decoded ``/common/basic_info`` body

        Returns:
            A BasicInfo instance
        """
        return cls(
            ret=record.get("ret"),
            type=record.get("type"),
            reg=record.get("reg"),
            ver=record.get("ver"),
            rev=record.get("rev"),
            name=record.get("name"),
            mac=record.get("mac"),
            raw=dict(record),
        )

    @property
    def firmware_revision(self) -> str:
        """Firmware version in dotted form (``1_2_3`` becomes ``1.2.3``)."""
        return (self.ver or "").replace("_", ".")


class ControlInfo(BaseModel):
    """Model for the ``ctrl_info`` record nested in the unit info."""

    pow: Optional[str] = None
    mode: Optional[str] = None
    airvol: Optional[str] = None

    # Every field, in appliance order; writes must echo it back.
    raw: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: RawRecord) -> "ControlInfo":
        return cls(
            pow=record.get("pow"),
            mode=record.get("mode"),
            airvol=record.get("airvol"),
            raw=dict(record),
        )

    @property
    def is_on(self) -> bool:
        return _is_one(self.pow)

    @property
    def is_auto(self) -> bool:
        return _is_one(self.mode)


class UnitInfo(BaseModel):
    """Model for ``/cleaner/get_unit_info``.

    The outer record carries four percent-encoded sub-records; each one is
    decoded into its own mapping.
    """

    ctrl_info: ControlInfo = Field(default_factory=ControlInfo)
    sensor_info: Dict[str, str] = Field(default_factory=dict)
    unit_status: Dict[str, str] = Field(default_factory=dict)
    dev_setting: Dict[str, str] = Field(default_factory=dict)

    raw: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: RawRecord) -> "UnitInfo":
        """
        Create a UnitInfo from a decoded response, expanding the nested fields.

        Args:
            record: The decoded ``/cleaner/get_unit_info`` body

        Returns:
            A UnitInfo instance
        """
        return cls(
            ctrl_info=ControlInfo.from_record(decode_nested(record.get("ctrl_info"))),
            sensor_info=decode_nested(record.get("sensor_info")),
            unit_status=decode_nested(record.get("unit_status")),
            dev_setting=decode_nested(record.get("dev_setting")),
            raw=dict(record),
        )
