"""
Hashing, identifier generation and token utilities.

Digest functions are coroutines: hashing runs in a worker thread so large
inputs never block an event loop serving other requests.
"""

import asyncio
import base64
import binascii
import hashlib
import hmac
import json
import secrets
import string
import time
import uuid
import zlib
from datetime import datetime, timezone

_CROCKFORD_BASE32 = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_NANOID_ALPHABET = string.ascii_letters + string.digits + "_-"
_BCRYPT_ALPHABET = string.ascii_letters + string.digits + "./"

# Timestamps above this are taken to be milliseconds
_MAX_SECONDS_TIMESTAMP = 9_999_999_999


def _hexdigest(algorithm: str, text: str) -> str:
    return hashlib.new(algorithm, text.encode("utf-8")).hexdigest()


async def md5_hash(text: str) -> str:
    """MD5 digest. Not suitable for security purposes."""
    return await asyncio.to_thread(_hexdigest, "md5", text)


async def sha1_hash(text: str) -> str:
    return await asyncio.to_thread(_hexdigest, "sha1", text)


async def sha256_hash(text: str) -> str:
    return await asyncio.to_thread(_hexdigest, "sha256", text)


async def sha512_hash(text: str) -> str:
    return await asyncio.to_thread(_hexdigest, "sha512", text)


async def generate_hmac_sha256(message: str, key: str) -> str:
    """HMAC-SHA256 of ``message``; an empty key is reported, not hashed."""
    if not key:
        return "Secret key required for HMAC"
    return await asyncio.to_thread(
        lambda: hmac.new(key.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()
    )


def generate_uuid_v4() -> str:
    return str(uuid.uuid4())


def generate_ulid() -> str:
    """26 characters: 48-bit millisecond timestamp then 80 random bits, Crockford base32."""
    now_ms = int(time.time() * 1000)
    time_part = ""
    for _ in range(10):
        now_ms, index = divmod(now_ms, 32)
        time_part = _CROCKFORD_BASE32[index] + time_part
    random_part = "".join(secrets.choice(_CROCKFORD_BASE32) for _ in range(16))
    return time_part + random_part


def generate_nano_id(size: int = 21) -> str:
    size = max(1, min(int(size), 256))
    return "".join(secrets.choice(_NANOID_ALPHABET) for _ in range(size))


def _decode_jwt_segment(segment: str) -> dict:
    padded = segment + "=" * (-len(segment) % 4)
    return json.loads(base64.urlsafe_b64decode(padded).decode("utf-8"))


def decode_jwt(token: str) -> str:
    """Decode a JWT without verifying its signature."""
    parts = token.strip().split(".")
    if len(parts) != 3:
        return "Invalid JWT format - must have 3 parts separated by dots"
    try:
        header = _decode_jwt_segment(parts[0])
        payload = _decode_jwt_segment(parts[1])
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        return f"Error decoding JWT: {e}"
    return json.dumps({"header": header, "payload": payload, "signature": parts[2]}, indent=2)


def generate_bcrypt_hash(text: str) -> str:
    """
    Produce a string shaped like a bcrypt hash (cost 10).

    This is a format sample for fixtures, not a real bcrypt digest of ``text``.
    """
    salt = "".join(secrets.choice(_BCRYPT_ALPHABET) for _ in range(22))
    digest = "".join(secrets.choice(_BCRYPT_ALPHABET) for _ in range(31))
    return f"$2b$10${salt}{digest}"


def unix_timestamp_to_date(text: str) -> str:
    """Seconds or milliseconds since the epoch -> 'ISO (local time)'."""
    try:
        timestamp = int(text.strip())
    except ValueError:
        return "Invalid timestamp"
    if abs(timestamp) > _MAX_SECONDS_TIMESTAMP:
        seconds = timestamp / 1000
    else:
        seconds = float(timestamp)
    try:
        moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return "Invalid date"
    iso = moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
    local = moment.astimezone().strftime("%Y-%m-%d %H:%M:%S %Z")
    return f"{iso} ({local})"


def _parse_date(text: str) -> datetime:
    value = text.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def date_to_unix_timestamp(text: str, in_milliseconds: bool = False) -> str:
    """ISO 8601 date -> seconds (or milliseconds) since the epoch. Naive dates are UTC."""
    try:
        moment = _parse_date(text)
    except ValueError:
        return "Invalid date format"
    millis = int(moment.timestamp() * 1000)
    return str(millis) if in_milliseconds else str(millis // 1000)


def generate_checksum(text: str) -> str:
    """CRC32 as eight uppercase hex digits."""
    return format(zlib.crc32(text.encode("utf-8")) & 0xFFFFFFFF, "08X")
