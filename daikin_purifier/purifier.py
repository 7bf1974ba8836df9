"""High-level air purifier proxy.

Translates the raw ``ctrl_info`` fields exposed by
:class:`daikin_purifier.api.client.DaikinPurifierClient` into the three values
the presentation layer shows (Active, current state, target state) and keeps
them fresh with a background poll.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Iterable, Optional, Set

from daikin_purifier.api.client import DaikinPurifierClient
from daikin_purifier.config import PurifierConfig
from daikin_purifier.enums import Active, Characteristic, CurrentPurifierState, TargetPurifierState
from daikin_purifier.exceptions import DaikinException
from daikin_purifier.models.accessory import AccessoryInformation
from daikin_purifier.models.info import ControlInfo

__all__: Iterable[str] = ["AirPurifier", "UpdateCallback"]


# Configure module logger
logger = logging.getLogger(__name__)


# Receives every value pushed to the presentation layer
UpdateCallback = Callable[[Characteristic, int], Awaitable[None]]


def _active_for(ctrl_info: ControlInfo) -> Active:
    return Active.ACTIVE if ctrl_info.is_on else Active.INACTIVE


def _current_state_for(ctrl_info: ControlInfo) -> CurrentPurifierState:
    # The device has no transitional signal, so IDLE is never reported.
    return CurrentPurifierState.PURIFYING_AIR if ctrl_info.is_on else CurrentPurifierState.INACTIVE


def _target_state_for(ctrl_info: ControlInfo) -> TargetPurifierState:
    # mode=1 is the appliance's "omakase" (fully automatic) setting
    return TargetPurifierState.AUTO if ctrl_info.is_auto else TargetPurifierState.MANUAL


class AirPurifier:
    """Proxy for one purifier: semantic getters/setters plus the poll loop."""

    def __init__(self, client: DaikinPurifierClient) -> None:
        """Initialize the purifier proxy.

        Parameters
        ----------
        client : DaikinPurifierClient
            The client used for all device communication; its config supplies
            the poll interval and display metadata
        """
        self._client = client

        # State change notification
        self._update_callbacks: Set[UpdateCallback] = set()
        self._poll_task: Optional[asyncio.Task] = None

    @classmethod
    def from_config(cls, config: PurifierConfig) -> AirPurifier:
        """Create a purifier with its own client."""
        return cls(DaikinPurifierClient(config))

    @property
    def client(self) -> DaikinPurifierClient:
        return self._client

    @property
    def config(self) -> PurifierConfig:
        return self._client.config

    # ------------------------------------------------------------------
    # Presentation-layer callbacks

    def register_update_callback(self, callback: UpdateCallback) -> None:
        """Register a coroutine called with ``(characteristic, value)`` on every push.

        Listeners are kept in a set; the order they are called in is not
        guaranteed.
        """
        self._update_callbacks.add(callback)

    def unregister_update_callback(self, callback: UpdateCallback) -> None:
        self._update_callbacks.discard(callback)

    async def _push(self, characteristic: Characteristic, value: int) -> None:
        for callback in list(self._update_callbacks):
            try:
                await callback(characteristic, value)
            except Exception as exc:
                logger.error(f"Update callback failed for {characteristic.value}: {exc}")

    # ------------------------------------------------------------------
    # Semantic getters / setters

    async def get_active(self) -> Active:
        """Return whether the purifier is switched on."""
        logger.info("Getting active state")
        unit_info = await self._client.get_unit_info()
        return _active_for(unit_info.ctrl_info)

    async def set_active(self, value: int) -> bool:
        """Switch the purifier on or off.

        On success the current state is pushed to listeners straight away
        instead of waiting for the next poll.

        Parameters
        ----------
        value : int
            ``Active.ACTIVE`` to switch on, anything else switches off

        Returns
        -------
        bool
            True if the device accepted the change

        Raises
        ------
        NetworkException
            If communication with the purifier fails
        """
        logger.info(f"[change] Setting active state to: {value}")
        is_active = value == Active.ACTIVE
        result = await self._client.set_control_info({"pow": 1 if is_active else 0})
        if result:
            await self._push(
                Characteristic.CURRENT_STATE,
                CurrentPurifierState.PURIFYING_AIR if is_active else CurrentPurifierState.INACTIVE,
            )
            logger.info(f"[change] Updated active state to: {value}")
        else:
            logger.info("[change] Failed to update active state")
        return result

    async def get_current_state(self) -> CurrentPurifierState:
        logger.info("Getting current air purifier state")
        unit_info = await self._client.get_unit_info()
        return _current_state_for(unit_info.ctrl_info)

    async def get_target_state(self) -> int:
        """Return the target mode as read on demand.

        While the purifier is off this returns the *inactive* current-state
        value (0) rather than looking at ``mode``.  The poll loop does not do
        this and always reports from ``mode``.  Since 0 is also MANUAL, an
        idle purifier set to automatic reads as manual here but as automatic
        after the next poll.

        Returns
        -------
        int
            ``TargetPurifierState`` value, or ``CurrentPurifierState.INACTIVE``
            when switched off
        """
        logger.info("Getting target air purifier state")
        unit_info = await self._client.get_unit_info()
        if not unit_info.ctrl_info.is_on:
            return CurrentPurifierState.INACTIVE
        return _target_state_for(unit_info.ctrl_info)

    async def set_target_state(self, value: int) -> bool:
        """Switch between automatic and manual mode.

        The full current ``ctrl_info`` is echoed back with ``mode`` replaced
        and ``airvol`` cleared to 0, so no other control field changes.

        Parameters
        ----------
        value : int
            ``TargetPurifierState.AUTO`` for automatic, anything else for manual

        Returns
        -------
        bool
            True if the device accepted the change
        """
        logger.info(f"[change] Setting target air purifier state to: {value}")
        unit_info = await self._client.get_unit_info()
        is_auto = value == TargetPurifierState.AUTO
        options = dict(unit_info.ctrl_info.raw)
        options["mode"] = 1 if is_auto else 0  # 1: omakase, 0: automatic fan speed
        options["airvol"] = 0
        result = await self._client.set_control_info(options)
        if result:
            logger.info(f"[change] Updated target air purifier state to: {value}")
        else:
            logger.info("[change] Failed to update target air purifier state")
        return result

    async def get_firmware_revision(self) -> str:
        """Return the dotted firmware version, or ``""`` if the device is unreachable."""
        logger.info("Getting Firmware Revision")
        try:
            basic_info = await self._client.get_basic_info()
        except DaikinException as exc:
            logger.error(f"Failed to read firmware revision: {exc}")
            return ""
        return basic_info.firmware_revision

    async def get_accessory_information(self) -> AccessoryInformation:
        """Return display metadata for the accessory."""
        config = self.config
        return AccessoryInformation(
            model=config.display_model,
            name=config.display_name,
            serial_number=config.display_serial_number,
            firmware_revision=await self.get_firmware_revision(),
        )

    # ------------------------------------------------------------------
    # Polling

    async def poll_once(self) -> None:
        """Read the unit info and push all three values to listeners."""
        unit_info = await self._client.get_unit_info()
        ctrl_info = unit_info.ctrl_info
        await self._push(Characteristic.ACTIVE, _active_for(ctrl_info))
        await self._push(Characteristic.CURRENT_STATE, _current_state_for(ctrl_info))
        await self._push(Characteristic.TARGET_STATE, _target_state_for(ctrl_info))

    async def _poll_loop(self) -> None:
        """Background task: wait one interval, poll, repeat."""
        interval = self.config.refresh_seconds
        while True:
            await asyncio.sleep(interval)
            try:
                await self.poll_once()
            except Exception as exc:
                logger.error(f"Error in poll cycle: {exc}")

    @property
    def is_polling(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    def start(self) -> None:
        """Start polling; a no-op if the poll task is already running."""
        if not self.is_polling:
            self._poll_task = asyncio.create_task(self._poll_loop())

    async def stop(self) -> None:
        """Cancel the poll task and wait for it to finish (idempotent)."""
        task, self._poll_task = self._poll_task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def close(self) -> None:
        """Stop polling and release the HTTP session."""
        await self.stop()
        await self._client.close()

    async def __aenter__(self) -> AirPurifier:
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"AirPurifier(ip={self.config.ip!r}, polling={self.is_polling})"
