"""Wire-level constants shared by the client and the purifier facade.

Keeping the paths in **one** place means a firmware change to the URL layout
only needs a single edit.
"""

BASIC_INFO_PATH: str = "/common/basic_info"
"""Firmware / model metadata."""

UNIT_INFO_PATH: str = "/cleaner/get_unit_info"
"""Current operating state, with percent-encoded nested records."""

SET_CONTROL_INFO_PATH: str = "/cleaner/set_control_info"
"""Control write; parameters go in the query string."""

RESULT_OK: str = "OK"
"""Value of the ``ret`` field on an accepted write."""

BASIC_INFO_TTL: float = 300.0
"""Basic info rarely changes; keep it for five minutes."""

MANUFACTURER: str = "DAIKIN INDUSTRIES, LTD.,"
"""Manufacturer shown in the accessory information (trailing comma included)."""

PLACEHOLDER: str = "-"
"""Display value for accessory metadata the user did not configure."""
