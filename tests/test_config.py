import pytest
from pydantic import ValidationError

from daikin_purifier.config import PurifierConfig


def test_defaults():
    config = PurifierConfig(ip="192.168.1.40")
    assert config.refresh_interval == 10000
    assert config.refresh_seconds == 10.0
    assert config.timeout == 5.0
    assert config.display_model == "-"
    assert config.display_name == "-"
    assert config.display_serial_number == "-"


def test_from_mapping_accepts_host_keys():
    config = PurifierConfig.from_mapping({
        "accessory": "DaikinAirPurifier",
        "ip": "10.0.0.7",
        "refreshInterval": 5000,
        "serialNumber": "SN123",
        "name": "Bedroom",
        "model": None,
    })
    assert config.ip == "10.0.0.7"
    assert config.refresh_interval == 5000
    assert config.display_serial_number == "SN123"
    assert config.display_name == "Bedroom"
    assert config.display_model == "-"


def test_from_mapping_accepts_snake_case():
    config = PurifierConfig.from_mapping({"ip": "10.0.0.7", "refresh_interval": 2500})
    assert config.refresh_seconds == 2.5


@pytest.mark.parametrize("data", [
    {"ip": ""},
    {"ip": "10.0.0.7", "refresh_interval": 0},
    {"ip": "10.0.0.7", "timeout": -1},
    {},
])
def test_invalid_config(data):
    with pytest.raises(ValidationError):
        PurifierConfig.from_mapping(data)


def test_config_is_read_only():
    config = PurifierConfig(ip="10.0.0.7")
    with pytest.raises(ValidationError):
        config.ip = "10.0.0.8"
