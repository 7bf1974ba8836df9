"""Codec for the purifier's comma-separated ``key=value`` bodies."""

from .parser import RawRecord, decode_nested, encode_query, parse_response

__all__ = ["RawRecord", "decode_nested", "encode_query", "parse_response"]
