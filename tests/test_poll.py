import asyncio
from unittest.mock import AsyncMock
from urllib.parse import quote

import pytest

from daikin_purifier import (
    Active,
    AirPurifier,
    Characteristic,
    CurrentPurifierState,
    DaikinPurifierClient,
    PurifierConfig,
    TargetPurifierState,
)
from daikin_purifier.exceptions.network import NetworkTimeoutError

UNIT_INFO = {
    "ret": "OK",
    "ctrl_info": quote("pow=1,mode=0,airvol=2", safe=""),
}


@pytest.fixture
def client():
    # 10 ms poll interval keeps the loop tests fast
    return DaikinPurifierClient(PurifierConfig(ip="192.168.1.40", refresh_interval=10))


@pytest.mark.asyncio
async def test_poll_once_pushes_all_values(client):
    client._get_request = AsyncMock(return_value=UNIT_INFO)
    purifier = AirPurifier(client)
    events = []

    async def cb(characteristic, value):
        events.append((characteristic, value))

    purifier.register_update_callback(cb)
    await purifier.poll_once()

    assert events == [
        (Characteristic.ACTIVE, Active.ACTIVE),
        (Characteristic.CURRENT_STATE, CurrentPurifierState.PURIFYING_AIR),
        (Characteristic.TARGET_STATE, TargetPurifierState.MANUAL),
    ]


@pytest.mark.asyncio
async def test_failing_listener_does_not_block_others(client):
    client._get_request = AsyncMock(return_value=UNIT_INFO)
    purifier = AirPurifier(client)
    broken = AsyncMock(side_effect=RuntimeError("boom"))
    healthy = AsyncMock()
    purifier.register_update_callback(broken)
    purifier.register_update_callback(healthy)

    await purifier.poll_once()
    assert healthy.await_count == 3


@pytest.mark.asyncio
async def test_unregistered_listener_is_not_called(client):
    client._get_request = AsyncMock(return_value=UNIT_INFO)
    purifier = AirPurifier(client)
    listener = AsyncMock()
    purifier.register_update_callback(listener)
    purifier.unregister_update_callback(listener)

    await purifier.poll_once()
    listener.assert_not_awaited()


@pytest.mark.asyncio
async def test_loop_polls_repeatedly(client):
    client._get_request = AsyncMock(return_value=UNIT_INFO)
    purifier = AirPurifier(client)
    listener = AsyncMock()
    purifier.register_update_callback(listener)

    purifier.start()
    await asyncio.sleep(0.1)
    await purifier.stop()

    assert client._get_request.await_count >= 2
    assert listener.await_count >= 6


@pytest.mark.asyncio
async def test_loop_waits_one_interval_before_first_poll():
    client = DaikinPurifierClient(PurifierConfig(ip="192.168.1.40", refresh_interval=60000))
    client._get_request = AsyncMock(return_value=UNIT_INFO)
    purifier = AirPurifier(client)

    purifier.start()
    await asyncio.sleep(0.05)
    await purifier.stop()

    client._get_request.assert_not_awaited()


@pytest.mark.asyncio
async def test_loop_survives_failed_cycle(client):
    client._get_request = AsyncMock(side_effect=[NetworkTimeoutError("timed out")] + [UNIT_INFO] * 50)
    purifier = AirPurifier(client)
    listener = AsyncMock()
    purifier.register_update_callback(listener)

    purifier.start()
    await asyncio.sleep(0.1)
    await purifier.stop()

    assert client._get_request.await_count >= 2
    listener.assert_any_await(Characteristic.ACTIVE, Active.ACTIVE)


@pytest.mark.asyncio
async def test_stop_cancels_pending_poll(client):
    client._get_request = AsyncMock(return_value=UNIT_INFO)
    purifier = AirPurifier(client)

    purifier.start()
    assert purifier.is_polling
    await purifier.stop()
    assert not purifier.is_polling

    calls = client._get_request.await_count
    await asyncio.sleep(0.05)
    assert client._get_request.await_count == calls

    # second stop is a no-op
    await purifier.stop()


@pytest.mark.asyncio
async def test_start_twice_keeps_single_task(client):
    client._get_request = AsyncMock(return_value=UNIT_INFO)
    purifier = AirPurifier(client)

    purifier.start()
    task = purifier._poll_task
    purifier.start()
    assert purifier._poll_task is task
    await purifier.stop()


@pytest.mark.asyncio
async def test_context_manager_starts_and_closes(client):
    client._get_request = AsyncMock(return_value=UNIT_INFO)
    client.close = AsyncMock()

    async with AirPurifier(client) as purifier:
        assert purifier.is_polling

    assert not purifier.is_polling
    client.close.assert_awaited_once()
