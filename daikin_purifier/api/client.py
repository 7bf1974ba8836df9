"""
Async client for communicating with a Daikin air purifier.
"""

import time
from typing import Any, Callable, Mapping, Optional

import aiohttp
import asyncio
import logging

from daikin_purifier.config import PurifierConfig
from daikin_purifier.exceptions.network import (
    ResponseError,
    NetworkConnectionError,
    NetworkTimeoutError,
)
from daikin_purifier.models.cache import CacheEntry
from daikin_purifier.models.info import BasicInfo, UnitInfo
from daikin_purifier.protocol.parser import RawRecord, encode_query, parse_response
from daikin_purifier.utils.http_consts import (
    BASIC_INFO_PATH,
    BASIC_INFO_TTL,
    RESULT_OK,
    SET_CONTROL_INFO_PATH,
    UNIT_INFO_PATH,
)

logger = logging.getLogger(__name__)


class DaikinPurifierClient:
    """Async client for the purifier's local HTTP API.

    Owns the HTTP session and the two response caches.  Nothing else should
    touch either cache.
    """

    def __init__(
        self,
        config: PurifierConfig,
        *,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize the purifier client.

        Args:
            config: Connection settings; ``refresh_interval`` doubles as the
                unit-info cache window
            clock: Monotonic time source in seconds (defaults to ``time.monotonic``)
        """
        self.config = config
        self._clock = clock or time.monotonic

        # Lazily-instantiated session
        self._session: aiohttp.ClientSession | None = None

        self._basic_info_cache: Optional[CacheEntry[BasicInfo]] = None
        self._unit_info_cache: Optional[CacheEntry[UnitInfo]] = None

    @property
    def host(self) -> str:
        return self.config.ip

    async def _get_session(self) -> aiohttp.ClientSession:
        """Return an open *aiohttp* session, creating it on first use."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        """Close the underlying *aiohttp* session (idempotent)."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    # Async-context manager convenience
    async def __aenter__(self):
        await self._get_session()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    # ------------------------------------------------------------------
    # Request implementation

    async def _get_request(self, resource: str) -> RawRecord:
        """
        Perform a GET request and decode the ``key=value`` body.

        Args:
            resource: Path starting with ``/``, query string included

        Returns:
            The decoded record

        Raises:
            NetworkConnectionError: If the connection fails
            NetworkTimeoutError: If the request exceeds ``config.timeout``
            ResponseError: If the transfer breaks off
        """
        url = f"http://{self.host}{resource}"
        session = await self._get_session()

        try:
            async with session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=self.config.timeout),
            ) as resp:
                if resp.status != 200:
                    # The body still carries the verdict (e.g. ret=PARAM NG).
                    logger.warning(f"HTTP {resp.status} for {resource}")
                # Undecodable bytes degrade the record rather than fail the call.
                body = await resp.text(encoding="utf-8", errors="replace")

        except asyncio.TimeoutError as exc:
            logger.error(f"request timed out {resource}: {exc}")
            raise NetworkTimeoutError(f"Request to {resource} timed out") from exc
        except aiohttp.ClientConnectorError as exc:
            logger.error(f"request error {resource}: {exc}")
            raise NetworkConnectionError(str(exc)) from exc
        except aiohttp.ClientError as exc:
            logger.error(f"request error {resource}: {exc}")
            raise ResponseError(500, str(exc)) from exc

        return parse_response(body)

    # ------------------------------------------------------------------
    # Cached readers

    async def get_basic_info(self) -> BasicInfo:
        """
        Return firmware / model metadata.

        Served from cache for five minutes after each fetch.
        """
        entry = self._basic_info_cache
        if entry is not None and entry.is_fresh(self._clock(), BASIC_INFO_TTL):
            logger.debug(f"{BASIC_INFO_PATH} cache: {entry.body.raw}")
            return entry.body

        record = await self._get_request(BASIC_INFO_PATH)
        logger.debug(f"{BASIC_INFO_PATH} {record}")
        body = BasicInfo.from_record(record)
        self._basic_info_cache = CacheEntry(body=body, time=self._clock())
        return body

    async def get_unit_info(self) -> UnitInfo:
        """
        Return the current operating state.

        Served from cache for one refresh interval, or until the next
        successful :meth:`set_control_info`.
        """
        entry = self._unit_info_cache
        if entry is not None and entry.is_fresh(self._clock(), self.config.refresh_seconds):
            logger.debug(f"{UNIT_INFO_PATH} cache: {entry.body.raw}")
            return entry.body

        record = await self._get_request(UNIT_INFO_PATH)
        body = UnitInfo.from_record(record)
        logger.debug(f"{UNIT_INFO_PATH} {body.model_dump(exclude={'raw'})}")
        self._unit_info_cache = CacheEntry(body=body, time=self._clock())
        return body

    # ------------------------------------------------------------------
    # Writer

    async def set_control_info(self, options: Mapping[str, Any]) -> bool:
        """
        Write control fields.

        The appliance resets any field left out of the query, so callers
        changing one setting should echo the rest of ``ctrl_info``.

        Args:
            options: Field name to value, sent in iteration order

        Returns:
            True if the device answered ``ret=OK``
        """
        query = encode_query(options)
        record = await self._get_request(f"{SET_CONTROL_INFO_PATH}?{query}")
        logger.debug(f"{SET_CONTROL_INFO_PATH} {record}")

        if record.get("ret") == RESULT_OK:
            self._unit_info_cache = None
            return True

        logger.warning(f"{SET_CONTROL_INFO_PATH} rejected ({record.get('ret')}): {query}")
        return False
