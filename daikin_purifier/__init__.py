"""
daikin_purifier - Async Python bridge for Daikin air purifiers.

This package polls a Daikin air purifier over its unauthenticated local HTTP
API, caches the responses briefly and translates the raw control fields into
power / mode states for a home-automation front end.
"""

__version__ = "0.1.0"

from daikin_purifier.api.client import DaikinPurifierClient
from daikin_purifier.purifier import AirPurifier, UpdateCallback
from daikin_purifier.config import PurifierConfig
from daikin_purifier.models.info import BasicInfo, ControlInfo, UnitInfo
from daikin_purifier.models.accessory import AccessoryInformation
from daikin_purifier.protocol.parser import parse_response
from daikin_purifier.exceptions import DaikinException
from daikin_purifier.exceptions.network import NetworkException, NetworkConnectionError, NetworkTimeoutError, ResponseError
from daikin_purifier.enums import Active, Characteristic, CurrentPurifierState, TargetPurifierState
