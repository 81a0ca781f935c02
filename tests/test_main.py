import uuid

import pytest

from z85_blocks.__main__ import main


def run(capsys, *args):
    main(["z85_blocks", *args])
    return capsys.readouterr().out.strip()


def test_encode(capsys):
    assert run(capsys, "encode", "864fd26fb559f75b") == "HelloWorld"


def test_decode(capsys):
    assert run(capsys, "decode", "HelloWorld") == "864fd26fb559f75b"


def test_uuid_round_trip(capsys):
    ident = uuid.uuid4()
    encoded = run(capsys, "uuid", str(ident))
    assert len(encoded) == 20
    assert run(capsys, "uuid", encoded) == str(ident)


def test_missing_action():
    with pytest.raises(SystemExit, match="action"):
        main(["z85_blocks"])


def test_unsupported_action():
    with pytest.raises(SystemExit, match="Unsupported action frob"):
        main(["z85_blocks", "frob"])


@pytest.mark.parametrize("action", ["encode", "decode", "uuid", "verkey"])
def test_missing_argument(action):
    with pytest.raises(SystemExit, match="Missing required arguments"):
        main(["z85_blocks", action])


def test_codec_error():
    with pytest.raises(SystemExit, match="error: input must be 4 byte aligned"):
        main(["z85_blocks", "encode", "00"])


def test_invalid_text():
    with pytest.raises(SystemExit, match="not valid Z85"):
        main(["z85_blocks", "decode", "Hello orld"])


def test_invalid_hex():
    with pytest.raises(SystemExit, match="invalid hex"):
        main(["z85_blocks", "encode", "zz"])


def test_invalid_uuid():
    with pytest.raises(SystemExit, match="invalid UUID"):
        main(["z85_blocks", "uuid", "not-a-uuid"])
