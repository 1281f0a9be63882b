"""
Tests for the TLV codec: decode, encode, lookup and checksum tag.
"""

import pytest
from pydantic import ValidationError

from thaiqr.errors import (
    IncompleteHeaderError,
    IncompleteValueError,
    InvalidConfigError,
    InvalidLengthError,
    InvalidValueError,
    TLVDecodeError,
)
from thaiqr.tlv import NestedTag, ValueTag, decode, encode, get, nested, tag, with_crc_tag


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def test_tag_computes_length():
    t = tag("00", "test")
    assert t == ValueTag(id="00", length=4, value="test")
    assert t.sub_tags == ()


def test_nested_computes_length_and_value():
    t = nested("29", [tag("01", "value1"), tag("02", "value2")])
    assert isinstance(t, NestedTag)
    assert t.length == 20
    assert t.value == "0106value10206value2"


def test_tags_are_immutable():
    t = tag("00", "01")
    with pytest.raises(ValidationError):
        t.value = "02"


def test_tag_length_counts_utf8_bytes():
    # 7 Thai characters, 3 bytes each
    t = tag("59", "ร้านค้า")
    assert t.length == 21
    assert encode([t]) == "5921ร้านค้า"


def test_nested_length_counts_utf8_bytes():
    t = nested("62", [tag("07", "ร้าน")])
    assert t.length == 4 + 12


def test_tag_accepts_99_bytes():
    assert tag("59", "x" * 99).length == 99


@pytest.mark.parametrize("value", ["x" * 100, "ก" * 34])
def test_tag_rejects_values_over_99_bytes(value):
    with pytest.raises(InvalidConfigError) as exc_info:
        tag("59", value)
    assert exc_info.value.field == "tag 59"


def test_nested_rejects_sub_tags_over_99_bytes():
    with pytest.raises(InvalidConfigError):
        nested("30", [tag("01", "x" * 50), tag("02", "y" * 50)])


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------

def test_encode_flat():
    assert encode([tag("00", "1111"), tag("01", "2222")]) == "0004111101042222"


def test_encode_empty():
    assert encode([]) == ""


def test_encode_nested():
    tags = [nested("29", [tag("01", "value1"), tag("02", "value2")])]
    assert encode(tags) == "29200106value10206value2"


def test_encode_pads_length_to_two_digits():
    assert encode([tag("58", "TH")]) == "5802TH"


def test_encode_trusts_declared_length():
    # keeping lengths consistent is the caller's job
    assert encode([ValueTag(id="00", length=9, value="ab")]) == "0009ab"


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------

def test_decode_three_tags():
    tags = decode("000411110104222202043333")
    assert [t.id for t in tags] == ["00", "01", "02"]
    assert [t.value for t in tags] == ["1111", "2222", "3333"]
    assert all(t.length == 4 for t in tags)


def test_decode_empty_payload():
    assert decode("") == []


def test_decode_leaves_values_flat():
    tags = decode("29200106value10206value2")
    assert len(tags) == 1
    assert isinstance(tags[0], ValueTag)
    assert tags[0].value == "0106value10206value2"


def test_decode_zero_length_value():
    assert decode("0000") == [ValueTag(id="00", length=0, value="")]


def test_decode_incomplete_header():
    with pytest.raises(IncompleteHeaderError) as exc_info:
        decode("000")
    assert exc_info.value.position == 0


def test_decode_incomplete_header_after_tags():
    with pytest.raises(IncompleteHeaderError) as exc_info:
        decode("0002AB01")
    assert exc_info.value.position == 6


def test_decode_invalid_length():
    with pytest.raises(InvalidLengthError) as exc_info:
        decode("00AB1234")
    assert exc_info.value.position == 2


@pytest.mark.parametrize("payload", ["00-1AB", "00+1AB", "00 1AB"])
def test_decode_rejects_signed_or_spaced_length(payload):
    with pytest.raises(InvalidLengthError):
        decode(payload)


def test_decode_incomplete_value():
    with pytest.raises(IncompleteValueError) as exc_info:
        decode("000412")
    err = exc_info.value
    assert err.position == 4
    assert err.expected == 4
    assert err.actual == 2


def test_decode_errors_share_base_class():
    for payload in ("000", "00AB1234", "000412"):
        with pytest.raises(TLVDecodeError):
            decode(payload)


def test_decode_utf8_value():
    assert decode("0002015921ร้านค้า") == [
        ValueTag(id="00", length=2, value="01"),
        ValueTag(id="59", length=21, value="ร้านค้า"),
    ]


def test_decode_positions_are_byte_offsets():
    with pytest.raises(IncompleteHeaderError) as exc_info:
        decode("5906ร้00")
    # 4 header bytes + 6 value bytes
    assert exc_info.value.position == 10


def test_decode_value_splitting_a_character():
    with pytest.raises(InvalidValueError) as exc_info:
        decode("5901ร")
    assert exc_info.value.position == 4


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("tags", [
    [tag("00", "1111"), tag("01", "2222")],
    [tag("00", "01"), tag("01", "11"), tag("58", "TH"), tag("59", "x" * 25)],
    [tag("81", "0E2A0E27"), tag("99", "")],
    [tag("00", "01"), tag("59", "ร้านค้า"), tag("60", "กรุงเทพ")],
])
def test_decode_encode_round_trip(tags):
    assert decode(encode(tags)) == tags


def test_encode_decode_reproduces_payload():
    payload = "00020101021229370016A0000006770101110113006680111111153037645802TH540520.15630442BE"
    assert encode(decode(payload)) == payload


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

@pytest.fixture
def lookup_tags():
    return [
        tag("00", "1111"),
        tag("01", "2222"),
        nested("29", [tag("01", "subvalue")]),
        tag("01", "second"),
    ]


def test_get_top_level(lookup_tags):
    assert get(lookup_tags, "01").value == "2222"


def test_get_sub_tag(lookup_tags):
    assert get(lookup_tags, "29", "01").value == "subvalue"


def test_get_missing_tag(lookup_tags):
    assert get(lookup_tags, "99") is None


def test_get_missing_sub_tag(lookup_tags):
    assert get(lookup_tags, "29", "99") is None


def test_get_sub_tag_of_leaf_is_none(lookup_tags):
    assert get(lookup_tags, "00", "01") is None


# ---------------------------------------------------------------------------
# Checksum tag
# ---------------------------------------------------------------------------

def test_with_crc_tag_appends_eight_characters():
    payload = "00020101021129370016A000000677010111011300668012345675802TH5303764"
    got = with_crc_tag(payload, "63", True)
    assert len(got) == len(payload) + 8
    assert got.startswith(payload + "6304")
    assert all(c in "0123456789ABCDEF" for c in got[-4:])


def test_with_crc_tag_lowercase_differs_only_in_case():
    payload = "00020101021129370016A000000677010111011300668012345675802TH5303764"
    upper = with_crc_tag(payload, "63", True)
    lower = with_crc_tag(payload, "63", False)
    assert lower.upper() == upper
    assert lower[-4:] == lower[-4:].lower()


def test_with_crc_tag_known_payload():
    payload = "00020101021129370016A0000006770101110113006681222333353037645802TH"
    assert with_crc_tag(payload, "63") == payload + "63041DCF"
