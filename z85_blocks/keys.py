from typing import Tuple

import base58
import libnacl as nacl

from .codec import decode_blocks, encode_blocks
from .error import InvalidInput

CURVE_KEY_LENGTH = 32
ENCODED_KEY_LENGTH = 40


def create_curve_keys() -> Tuple[str, str]:
    pk, sk = nacl.crypto_box_keypair()
    return encode_blocks(pk), encode_blocks(sk)


def curve_key_bytes(key: str) -> bytes:
    if len(key) != ENCODED_KEY_LENGTH:
        raise InvalidInput(
            f"curve key must be {ENCODED_KEY_LENGTH} characters: {key!r}", key
        )
    return decode_blocks(key)


def verkey_to_curve(verkey: str) -> str:
    try:
        verkey_bytes = base58.b58decode(verkey)
    except ValueError:
        raise InvalidInput(f"verkey is not valid base58: {verkey!r}", verkey) from None
    if len(verkey_bytes) != CURVE_KEY_LENGTH:
        raise InvalidInput(
            f"verkey must be {CURVE_KEY_LENGTH} bytes in length: {verkey!r}", verkey
        )
    try:
        curve_pk = nacl.crypto_sign_ed25519_pk_to_curve25519(verkey_bytes)
    except nacl.CryptError:
        raise InvalidInput(
            f"verkey is not a valid Ed25519 key: {verkey!r}", verkey
        ) from None
    return encode_blocks(curve_pk)
