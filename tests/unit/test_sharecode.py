"""Tests for share code encoding and decoding."""

from __future__ import annotations

import base64
import random
import zlib

import pytest

from epochforge.domain.enums import MapType, PresetMode
from epochforge.domain.errors import ConfigurationError, ShareCodeError
from epochforge.domain.rules_config import DEFAULT_RULES
from epochforge.schemas import MatchConfigRequest, PlayerEntry, RandomizableOption
from epochforge.schemas.match import MAX_NAME_LENGTH, MAX_SEED_LENGTH
from epochforge.sharecode import MAX_SHARE_CODE_LENGTH, decode_share_code, encode_share_code


def _request() -> MatchConfigRequest:
    return MatchConfigRequest(
        seed="EF-1234",
        players=[PlayerEntry(name="Taco", archetype="Naval"), PlayerEntry(name="Piert")],
        end_epoch_random=True,
        end_epoch_min=6,
        end_epoch_max=12,
        map_type=RandomizableOption[MapType](
            mode="random",
            value=MapType.CONTINENTAL,
            allowed=[MapType.SMALL_ISLANDS, MapType.LARGE_ISLANDS],
        ),
        preset=RandomizableOption[PresetMode](value=PresetMode.TOURNAMENT),
    )


def test_code_is_url_safe():
    code = encode_share_code(_request())
    assert code
    assert set(code) <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_")


def test_decode_restores_request():
    request = _request()
    assert decode_share_code(encode_share_code(request)) == request


def test_surrounding_whitespace_is_ignored():
    code = encode_share_code(_request())
    assert decode_share_code(f"  {code}\n").seed == "EF-1234"


@pytest.mark.parametrize("code", ["", "   ", "!!!!", "bm90IHpsaWI", "é"])
def test_garbage_rejected(code):
    with pytest.raises(ShareCodeError):
        decode_share_code(code)


def test_valid_token_with_invalid_config_rejected():
    payload = zlib.compress(b'{"players": [], "start_epoch": 99}')
    code = base64.urlsafe_b64encode(payload).decode("ascii").rstrip("=")
    with pytest.raises(ShareCodeError, match="valid match configuration"):
        decode_share_code(code)


def test_oversized_code_rejected():
    with pytest.raises(ShareCodeError, match="too long"):
        decode_share_code("A" * (MAX_SHARE_CODE_LENGTH + 1))


def test_share_code_error_is_a_configuration_error():
    assert issubclass(ShareCodeError, ConfigurationError)
    assert issubclass(ShareCodeError, ValueError)


def _names(count: int, seed: int) -> list[str]:
    rng = random.Random(seed)
    return [
        "".join(chr(rng.randrange(0x1F300, 0x1F600)) for _ in range(MAX_NAME_LENGTH))
        for _ in range(count)
    ]


def test_largest_valid_roster_round_trips():
    names = _names(DEFAULT_RULES.max_players, seed=4499)
    request = MatchConfigRequest(
        seed="S" * MAX_SEED_LENGTH,
        players=[PlayerEntry(name=name, archetype="Random") for name in names],
        end_epoch_random=True,
        map_type=RandomizableOption[MapType](
            mode="random", value=MapType.CONTINENTAL, allowed=list(MapType)
        ),
        preset=RandomizableOption[PresetMode](
            mode="random", value=PresetMode.CASUAL, allowed=list(PresetMode)
        ),
    )

    code = encode_share_code(request)

    assert len(code) <= MAX_SHARE_CODE_LENGTH
    assert decode_share_code(code) == request


def test_encode_refuses_codes_the_decoder_would_reject():
    request = MatchConfigRequest(players=[PlayerEntry(name=name) for name in _names(150, seed=7)])
    with pytest.raises(ShareCodeError, match="too large"):
        encode_share_code(request)
