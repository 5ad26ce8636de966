from types import NoneType
from typing import NewType

from lexkey.key_types import (
    DEFAULT_TYPE_ALIAS_MAP,
    DEFAULT_TYPE_TO_KEY_TYPE_MAP,
    BoolKeyType,
    BytesKeyType,
    CharKeyType,
    Float32KeyType,
    Float64KeyType,
    Int8KeyType,
    Int64KeyType,
    KeyType,
    NullKeyType,
    StrKeyType,
    TupleKeyType,
    Uint8KeyType,
    Uint32KeyType,
    Uint128KeyType,
    make_key_type,
)
from lexkey.serialization import (
    BadDataError,
    OutOfDataError,
    SerializationTypeError,
    SerializationValueError,
    TrailingDataError,
    UnsupportedTypeError,
)
from lexkey.types import Binary, Char, Float32, Int8, Int128, Uint8, Uint32, Uint128
from tests import unittest

AccountNumber = NewType('AccountNumber', Uint32)
Branch = NewType('Branch', AccountNumber)


class KeyTypeTestCase(unittest.TestCase):
    def test_builtin_types(self) -> None:
        self.assertIsInstance(make_key_type(bool), BoolKeyType)
        self.assertIsInstance(make_key_type(int), Int64KeyType)
        self.assertIsInstance(make_key_type(float), Float64KeyType)
        self.assertIsInstance(make_key_type(str), StrKeyType)
        self.assertIsInstance(make_key_type(bytes), BytesKeyType)
        self.assertIsInstance(make_key_type(bytearray), BytesKeyType)
        self.assertIsInstance(make_key_type(None), NullKeyType)
        self.assertIsInstance(make_key_type(type(None)), NullKeyType)
        self.assertIsInstance(make_key_type(tuple[int, str]), TupleKeyType)

    def test_sized_types(self) -> None:
        self.assertIsInstance(make_key_type(Int8), Int8KeyType)
        self.assertIsInstance(make_key_type(Uint8), Uint8KeyType)
        self.assertIsInstance(make_key_type(Uint32), Uint32KeyType)
        self.assertIsInstance(make_key_type(Uint128), Uint128KeyType)
        self.assertIsInstance(make_key_type(Float32), Float32KeyType)
        self.assertIsInstance(make_key_type(Char), CharKeyType)
        self.assertIsInstance(make_key_type(Binary), BytesKeyType)

    def test_newtype_chain(self) -> None:
        self.assertIsInstance(make_key_type(AccountNumber), Uint32KeyType)
        self.assertIsInstance(make_key_type(Branch), Uint32KeyType)
        self.assertRoundTrip(Branch, 1234, '000004d2')

    def test_num_components(self) -> None:
        self.assertEqual(make_key_type(None).num_components(), 0)
        self.assertEqual(make_key_type(tuple[()]).num_components(), 0)
        self.assertEqual(make_key_type(str).num_components(), 1)
        self.assertEqual(make_key_type(tuple[str, Uint32, None]).num_components(), 2)
        self.assertEqual(make_key_type(tuple[str, tuple[bool, tuple[()], bytes]]).num_components(), 3)

    def test_scalar_round_trips(self) -> None:
        self.assertRoundTrip(bool, True, 'true')
        self.assertRoundTrip(bool, False, 'false')
        self.assertRoundTrip(Int8, -128, '00')
        self.assertRoundTrip(Int8, 127, 'ff')
        self.assertRoundTrip(Uint8, 255, 'ff')
        self.assertRoundTrip(int, 0, '8000000000000000')
        self.assertRoundTrip(Int128, -1, '7fffffffffffffffffffffffffffffff')
        self.assertRoundTrip(Uint128, 2**128 - 1, 'f' * 32)
        self.assertRoundTrip(float, 1.0, 'bff0000000000000')
        self.assertRoundTrip(Float32, 1.5, 'bfc00000')
        self.assertRoundTrip(str, 'hello world', 'hello world')
        self.assertRoundTrip(str, '', '')
        self.assertRoundTrip(Char, 'λ', 'λ')
        self.assertRoundTrip(bytes, b'\x00\xff', '00ff')
        self.assertRoundTrip(bytes, b'', '')
        self.assertRoundTrip(None, None, '')
        self.assertRoundTrip(tuple[()], (), '')

    def test_tuple_round_trips(self) -> None:
        self.assertRoundTrip(tuple[str, Uint32], ('account', 1234), 'account:000004d2')
        self.assertRoundTrip(tuple[str, Uint8, bool], ('hello world', 2, True), 'hello world:02:true')
        self.assertRoundTrip(tuple[str, tuple[Uint8, Uint8]], ('x', (1, 2)), 'x:01:02')
        self.assertRoundTrip(tuple[None, str, tuple[()]], (None, 'only', ()), 'only')

    def test_unit_between_fields(self) -> None:
        self.assertRoundTrip(tuple[str, None, str], ('a', None, 'b'), 'a:b')
        self.assertRoundTrip(tuple[str, NoneType, str], ('a', None, 'b'), 'a:b')
        self.assertIsInstance(make_key_type(tuple[str, None, str]), TupleKeyType)
        self.assertEqual(make_key_type(tuple[str, None, str]).num_components(), 2)

    def test_float_accepts_int(self) -> None:
        key_type = make_key_type(float)
        self.assertEqual(key_type.to_text(1), key_type.to_text(1.0))
        self.assertEqual(key_type.from_text(key_type.to_text(1)), 1.0)

    def test_bytearray_is_accepted(self) -> None:
        key_type = make_key_type(bytearray)
        self.assertEqual(key_type.to_text(bytearray(b'\x01\x02')), '0102')
        decoded = key_type.from_text('0102')
        self.assertEqual(decoded, b'\x01\x02')
        self.assertIs(type(decoded), bytes)

    def test_bool_is_not_an_int(self) -> None:
        with self.assertRaises(SerializationTypeError):
            make_key_type(Uint8).to_text(True)
        with self.assertRaises(SerializationTypeError):
            make_key_type(float).to_text(False)
        with self.assertRaises(SerializationTypeError):
            make_key_type(bool).to_text(1)

    def test_out_of_range(self) -> None:
        with self.assertRaises(SerializationValueError):
            make_key_type(Uint8).to_text(256)
        with self.assertRaises(SerializationValueError):
            make_key_type(Uint8).to_text(-1)
        with self.assertRaises(SerializationValueError):
            make_key_type(Int8).to_text(128)
        with self.assertRaises(SerializationValueError):
            make_key_type(int).to_text(2**63)
        with self.assertRaises(SerializationValueError):
            make_key_type(Float32).to_text(1e39)

    def test_int_too_large_for_float(self) -> None:
        for type_ in [float, Float32]:
            key_type = make_key_type(type_)
            with self.subTest(type=type_.__name__):
                with self.assertRaises(SerializationValueError):
                    key_type.to_text(10**400)
                with self.assertRaises(SerializationValueError):
                    key_type.check_value(-10**400)

    def test_wrong_value_types(self) -> None:
        with self.assertRaises(SerializationTypeError):
            make_key_type(str).to_text(b'abc')
        with self.assertRaises(SerializationTypeError):
            make_key_type(bytes).to_text('abc')
        with self.assertRaises(SerializationTypeError):
            make_key_type(int).to_text(1.0)
        with self.assertRaises(SerializationTypeError):
            make_key_type(None).to_text(0)
        with self.assertRaises(SerializationTypeError):
            make_key_type(tuple[str, int]).to_text(['a', 1])
        with self.assertRaises(SerializationTypeError):
            make_key_type(tuple[str, int]).to_text(('a', 1, 2))

    def test_char_length(self) -> None:
        key_type = make_key_type(Char)
        with self.assertRaises(SerializationValueError):
            key_type.to_text('')
        with self.assertRaises(SerializationValueError):
            key_type.to_text('ab')
        with self.assertRaises(BadDataError):
            key_type.from_text('ab')

    def test_check_value_is_deep(self) -> None:
        key_type = make_key_type(tuple[str, tuple[Uint8, bool]])
        key_type.check_value(('a', (1, True)))
        with self.assertRaises(SerializationValueError):
            key_type.check_value(('a', (256, True)))
        with self.assertRaises(SerializationTypeError):
            key_type.check_value(('a', (1, 'yes')))

    def test_failed_encoding_has_no_partial_output(self) -> None:
        key_type = make_key_type(tuple[str, Uint8])
        with self.assertRaises(SerializationValueError):
            key_type.to_text(('account', 300))
        self.assertEqual(key_type.to_text(('account', 30)), 'account:1e')

    def test_component_count_mismatch(self) -> None:
        key_type = make_key_type(tuple[str, Uint32])
        with self.assertRaises(OutOfDataError):
            key_type.from_text('account')
        with self.assertRaises(TrailingDataError):
            key_type.from_text('account:000004d2:extra')
        with self.assertRaises(TrailingDataError):
            make_key_type(None).from_text('x')

    def test_bad_component(self) -> None:
        key_type = make_key_type(tuple[str, Uint32, bool])
        with self.assertRaises(BadDataError) as cm:
            key_type.from_text('account:000004d2:yes')
        self.assertEqual(cm.exception.index, 2)
        self.assertEqual(cm.exception.expected, 'bool')

    def test_invalid_utf8(self) -> None:
        key_type = make_key_type(str)
        with self.assertRaises(BadDataError) as cm:
            key_type.from_bytes(b'\xff\xfe')
        self.assertEqual(cm.exception.expected, 'utf-8')

    def test_lone_surrogate_cannot_be_encoded(self) -> None:
        with self.assertRaises(SerializationValueError):
            make_key_type(str).to_bytes('\ud800')

    def test_explicit_delimiter(self) -> None:
        key_type = make_key_type(tuple[str, str])
        self.assertEqual(key_type.to_text(('a:b', 'c'), delimiter='/'), 'a:b/c')
        self.assertEqual(key_type.from_text('a:b/c', delimiter='/'), ('a:b', 'c'))

    def test_delimiter_in_text(self) -> None:
        key_type = make_key_type(tuple[str, str])
        # not checked by default, the key can't be read back
        text = key_type.to_text(('a:b', 'c'))
        self.assertEqual(text, 'a:b:c')
        with self.assertRaises(TrailingDataError):
            key_type.from_text(text)
        with self.assertRaises(SerializationValueError):
            key_type.to_text(('a:b', 'c'), check_delimiter=True)

    def test_unsupported_type(self) -> None:
        class Unknown:
            pass

        with self.assertRaises(UnsupportedTypeError) as cm:
            make_key_type(Unknown)
        self.assertIsNone(cm.exception.construct)
        with self.assertRaises(UnsupportedTypeError):
            make_key_type('str')

    def test_extra_key_types_map(self) -> None:
        Timestamp = NewType('Timestamp', int)
        self.assertIsInstance(make_key_type(Timestamp), Int64KeyType)
        key_type = make_key_type(Timestamp, extra_key_types_map={Timestamp: Uint32KeyType})
        self.assertIsInstance(key_type, Uint32KeyType)
        self.assertEqual(key_type.to_text(1234), '000004d2')

    def test_from_type_with_custom_type_map(self) -> None:
        type_map = KeyType.TypeMap(DEFAULT_TYPE_ALIAS_MAP, {**DEFAULT_TYPE_TO_KEY_TYPE_MAP, int: Uint8KeyType})
        key_type = KeyType.from_type(tuple[int, str], type_map=type_map)
        self.assertEqual(key_type.to_text((7, 'x')), '07:x')
        KeyType.check_type(tuple[int, str], type_map=type_map)


if __name__ == '__main__':
    unittest.main()
