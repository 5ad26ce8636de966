import pytest

from lexkey.serialization import BadDataError, Deserializer, SerializationValueError, Serializer
from lexkey.serialization.encoding.int import (
    decode_int,
    encode_int,
    int_bounds,
    int_to_ordered,
    ordered_to_int,
)

SIZES = [1, 2, 4, 8, 16]


def _encode(n: int, length: int, signed: bool) -> str:
    se = Serializer.build_text_serializer()
    encode_int(se, n, length=length, signed=signed)
    return se.finalize()


def _decode(text: str, length: int, signed: bool) -> int:
    de = Deserializer.build_text_deserializer(text)
    n = decode_int(de, length=length, signed=signed)
    de.finalize()
    return n


KNOWN_VECTORS = [
    (123, 1, True, 'fb'),
    (12345, 2, True, 'b039'),
    (1234567890, 4, True, 'c99602d2'),
    (1234567890123, 8, True, '8000011f71fb04cb'),
    (123456789012345678901234567890, 16, True, '800000018ee90ff6c373e0ee4e3f0ad2'),
    (0xaabbccdd, 4, False, 'aabbccdd'),
    (0, 1, True, '80'),
    (-1, 1, True, '7f'),
    (-128, 1, True, '00'),
    (127, 1, True, 'ff'),
    (0, 4, False, '00000000'),
    (1234, 4, False, '000004d2'),
    (-1, 4, True, '7fffffff'),
]


@pytest.mark.parametrize('n, length, signed, text', KNOWN_VECTORS)
def test_known_vectors(n: int, length: int, signed: bool, text: str) -> None:
    assert _encode(n, length, signed) == text
    assert _decode(text, length, signed) == n


def gen_boundary_test_cases():
    test_cases = []
    for length in SIZES:
        for signed in (True, False):
            lower, upper = int_bounds(length, signed)
            for n in sorted({lower, lower + 1, -1 if signed else 1, 0, 1, upper - 1, upper}):
                test_cases.append((n, length, signed))
    return test_cases


@pytest.mark.parametrize('n, length, signed', gen_boundary_test_cases())
def test_boundaries_round_trip_with_fixed_width(n: int, length: int, signed: bool) -> None:
    text = _encode(n, length, signed)
    assert len(text) == 2 * length
    assert text == text.lower()
    assert _decode(text, length, signed) == n


@pytest.mark.parametrize('length', SIZES)
@pytest.mark.parametrize('signed', [True, False])
def test_out_of_range(length: int, signed: bool) -> None:
    lower, upper = int_bounds(length, signed)
    with pytest.raises(SerializationValueError):
        _encode(upper + 1, length, signed)
    with pytest.raises(SerializationValueError):
        _encode(lower - 1, length, signed)


@pytest.mark.parametrize('length', SIZES)
def test_signed_order(length: int) -> None:
    lower, upper = int_bounds(length, True)
    values = [lower, lower + 1, -1000, -2, -1, 0, 1, 2, 1000, upper - 1, upper]
    values = [v for v in values if lower <= v <= upper]
    texts = [_encode(v, length, True) for v in values]
    assert texts == sorted(texts)
    assert len(set(texts)) == len(texts)


@pytest.mark.parametrize('length', SIZES)
def test_ordered_transform_inverse(length: int) -> None:
    lower, upper = int_bounds(length, True)
    for n in (lower, -1, 0, 1, upper):
        ordered = int_to_ordered(n, length=length, signed=True)
        assert 0 <= ordered < (1 << (8 * length))
        assert ordered_to_int(ordered, length=length, signed=True) == n


@pytest.mark.parametrize('text', ['1', '0000000', '000000000', 'ABCDEF01', '0000000g', '', '-0000001'])
def test_bad_data(text: str) -> None:
    de = Deserializer.build_text_deserializer(text, num_components=1)
    with pytest.raises(BadDataError) as exc_info:
        decode_int(de, length=4, signed=False)
    assert exc_info.value.index == 0
    assert exc_info.value.expected == 'Uint32'


def test_bad_data_reports_component_index() -> None:
    de = Deserializer.build_text_deserializer('00000001:zz')
    assert decode_int(de, length=4, signed=True) == -(2**31) + 1
    with pytest.raises(BadDataError) as exc_info:
        decode_int(de, length=1, signed=False)
    assert exc_info.value.index == 1
    assert exc_info.value.expected == 'Uint8'
    assert 'component 1' in str(exc_info.value)
