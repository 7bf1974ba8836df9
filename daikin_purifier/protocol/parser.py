from __future__ import annotations

from typing import Any, Dict, Mapping, Optional
from urllib.parse import unquote

RawRecord = Dict[str, str]


def parse_response(body: str) -> RawRecord:
    """Decode a ``k1=v1,k2=v2,...`` body into a flat mapping.

    Tokens that do not split into exactly one key and one value are dropped,
    so values containing ``=`` are lost.  A repeated key keeps its last value.
    Never raises: garbage in gives a smaller (possibly empty) record out.
    """
    record: RawRecord = {}
    for token in body.split(","):
        parts = token.split("=")
        if len(parts) != 2:
            continue
        record[parts[0]] = parts[1]
    return record


def decode_nested(value: Optional[str]) -> RawRecord:
    """Percent-decode a nested field and parse it as a record.

    A missing field decodes to an empty record.
    """
    if value is None:
        return {}
    return parse_response(unquote(value))


def encode_query(options: Mapping[str, Any]) -> str:
    """Render *options* as ``k=v&k=v`` in insertion order.

    Values are passed through ``str()`` only; the appliance expects the raw
    strings it handed out, so nothing is escaped here.
    """
    return "&".join(f"{key}={value}" for key, value in options.items())
