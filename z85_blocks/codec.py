import struct
import uuid

from typing import Union

from .error import InvalidInput

# Z85 character set: https://rfc.zeromq.org/spec/32/
MAP_ENCODE = (
    "0123456789abcdefghijklmnopqrstuvwxyzABCDEFG"
    "HIJKLMNOPQRSTUVWXYZ.-:+=^!/*?&<>()[]{}@%$#"
)

BASE = 85
BASE_2ND_POWER = BASE ** 2
BASE_3RD_POWER = BASE ** 3
BASE_4TH_POWER = BASE ** 4

ASCII_BITMASK = 0x7F
BLOCK_MASK = 0xFFFFFFFF
# has bits outside ASCII_BITMASK, so it taints the canary
INVALID_DIGIT = 0xFF

# UUIDs always encode into 20 characters
ENCODED_UUID_LENGTH = 20


def _build_decode_map() -> tuple:
    table = [INVALID_DIGIT] * (ASCII_BITMASK + 1)
    for (idx, c) in enumerate(MAP_ENCODE):
        table[ord(c)] = idx
    return tuple(table)


MAP_DECODE = _build_decode_map()


def decode_blocks(encoded: Union[str, bytes]) -> bytes:
    if isinstance(encoded, str):
        codes = tuple(map(ord, encoded))
    elif isinstance(encoded, (bytes, bytearray, memoryview)):
        codes = bytes(encoded)
    else:
        raise TypeError(f"expected str or bytes, not {type(encoded).__name__}")
    if len(codes) % 5 != 0:
        raise InvalidInput(
            f"input must be 5 character aligned: {encoded!r}", encoded
        )
    buf = bytearray(len(codes) // 5 * 4)

    # Invalid characters are detected with a single check at the very end,
    # instead of branching for every character: non-ascii codes have bits
    # outside ASCII_BITMASK, and so does the digit of any unmapped character.
    canary = 0
    copy_to = 0
    for pos in range(0, len(codes), 5):
        c0, c1, c2, c3, c4 = codes[pos : pos + 5]
        d0 = MAP_DECODE[c0 & ASCII_BITMASK]
        d1 = MAP_DECODE[c1 & ASCII_BITMASK]
        d2 = MAP_DECODE[c2 & ASCII_BITMASK]
        d3 = MAP_DECODE[c3 & ASCII_BITMASK]
        d4 = MAP_DECODE[c4 & ASCII_BITMASK]
        canary |= c0 | c1 | c2 | c3 | c4 | d0 | d1 | d2 | d3 | d4
        val = (
            d0 * BASE_4TH_POWER
            + d1 * BASE_3RD_POWER
            + d2 * BASE_2ND_POWER
            + d3 * BASE
            + d4
        )
        # sums above 32 bits wrap, as in 32-bit implementations
        struct.pack_into(">L", buf, copy_to, val & BLOCK_MASK)
        copy_to += 4
    if canary & ~ASCII_BITMASK:
        raise InvalidInput(f"input is not valid Z85: {encoded!r}", encoded)
    return bytes(buf)


def encode_blocks(data: bytes) -> str:
    if len(data) % 4 != 0:
        raise InvalidInput(f"input must be 4 byte aligned: {data!r}", data)
    chars = []
    for (val,) in struct.iter_unpack(">L", data):
        rem = val % BASE_4TH_POWER
        chars.append(MAP_ENCODE[val // BASE_4TH_POWER])
        chars.append(MAP_ENCODE[rem // BASE_3RD_POWER])
        rem %= BASE_3RD_POWER
        chars.append(MAP_ENCODE[rem // BASE_2ND_POWER])
        rem %= BASE_2ND_POWER
        chars.append(MAP_ENCODE[rem // BASE])
        chars.append(MAP_ENCODE[rem % BASE])
    return "".join(chars)


def encode_uuid(value: uuid.UUID) -> str:
    return encode_blocks(value.bytes)


def decode_uuid(encoded: str) -> uuid.UUID:
    if len(encoded) != ENCODED_UUID_LENGTH:
        raise InvalidInput(
            f"encoded UUID must be {ENCODED_UUID_LENGTH} characters: {encoded!r}",
            encoded,
        )
    return uuid.UUID(bytes=decode_blocks(encoded))
