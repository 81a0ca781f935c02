import sys
import uuid

from typing import Optional

from .codec import (
    ENCODED_UUID_LENGTH,
    decode_blocks,
    decode_uuid,
    encode_blocks,
    encode_uuid,
)
from .error import Z85Error


def run_action(action: str, args: list):
    if action == "encode":
        if not args:
            raise SystemExit("Missing required arguments (hex)")
        try:
            data = bytes.fromhex(args[0])
        except ValueError:
            raise SystemExit(f"error: invalid hex input {args[0]!r}") from None
        print(encode_blocks(data))
    elif action == "decode":
        if not args:
            raise SystemExit("Missing required arguments (text)")
        print(decode_blocks(args[0]).hex())
    elif action == "uuid":
        if not args:
            raise SystemExit("Missing required arguments (uuid or text)")
        value = args[0]
        if len(value) == ENCODED_UUID_LENGTH:
            print(decode_uuid(value))
        else:
            try:
                ident = uuid.UUID(value)
            except ValueError:
                raise SystemExit(f"error: invalid UUID {value!r}") from None
            print(encode_uuid(ident))
    # key actions need libsodium, so libnacl is only loaded for them
    elif action == "keys":
        from .keys import create_curve_keys

        public, secret = create_curve_keys()
        print("public:", public)
        print("secret:", secret)
    elif action == "verkey":
        if not args:
            raise SystemExit("Missing required arguments (verkey)")
        from .keys import verkey_to_curve

        print(verkey_to_curve(args[0]))
    else:
        raise SystemExit(f"Unsupported action {action}")


def main(argv: Optional[list] = None):
    argv = sys.argv if argv is None else argv
    if len(argv) < 2:
        raise SystemExit("Missing required arguments (action)")
    try:
        run_action(argv[1], argv[2:])
    except Z85Error as ex:
        raise SystemExit(f"error: {ex}") from None


if __name__ == "__main__":
    main()
