from dataclasses import dataclass, field
from enum import Enum, IntEnum, StrEnum, auto
from typing import Annotated, NamedTuple

from pydantic import BaseModel, Field

from lexkey.key_types import (
    DataclassKeyType,
    EnumKeyType,
    ModelKeyType,
    NamedTupleKeyType,
    TupleKeyType,
    make_key_type,
)
from lexkey.serialization import BadDataError, SerializationTypeError, SerializationValueError, UnsupportedTypeError
from lexkey.types import Float32, Uint8, Uint32
from tests import unittest


@dataclass(frozen=True)
class AccountId:
    domain: str
    user_id: Uint32


class Point(NamedTuple):
    x: Uint8
    y: Uint8


class Version(BaseModel):
    major: Uint8
    minor: Uint8
    label: str


class Threshold(BaseModel):
    name: str
    limit: Annotated[int, Field(gt=10)]


@dataclass(frozen=True)
class Range:
    low: Uint8
    high: Uint8

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError('low must not be greater than high')


@dataclass
class Empty:
    pass


class Nothing(NamedTuple):
    pass


class Status(Enum):
    Active = 1
    Inactive = 2
    Archived = 0


class Level(IntEnum):
    HIGH = 1
    LOW = 2


class Color(StrEnum):
    RED = auto()
    BLUE = auto()


class Flag(Enum):
    ON = 1
    ENABLED = 1  # alias of ON


@dataclass
class Audited:
    name: str
    revision: int = field(init=False, default=0)


@dataclass(frozen=True)
class Entry:
    account: AccountId
    status: Status
    position: Point
    weight: Float32


class RecordsTestCase(unittest.TestCase):
    def test_key_type_classes(self) -> None:
        self.assertIsInstance(make_key_type(AccountId), DataclassKeyType)
        self.assertIsInstance(make_key_type(Point), NamedTupleKeyType)
        self.assertIsInstance(make_key_type(Version), ModelKeyType)
        self.assertIsInstance(make_key_type(Status), EnumKeyType)
        self.assertIsInstance(make_key_type(Level), EnumKeyType)
        self.assertIsInstance(make_key_type(Color), EnumKeyType)
        self.assertIsInstance(make_key_type(tuple[str, AccountId]), TupleKeyType)

    def test_record_inside_tuple(self) -> None:
        value = ('account', AccountId(domain='abc', user_id=1234))
        self.assertRoundTrip(tuple[str, AccountId], value, 'account:abc:000004d2')

    def test_field_names_are_not_encoded(self) -> None:
        self.assertEqual(make_key_type(AccountId).to_text(AccountId('abc', 1234)), 'abc:000004d2')
        self.assertEqual(
            make_key_type(AccountId).to_text(AccountId('abc', 1234)),
            make_key_type(tuple[str, Uint32]).to_text(('abc', 1234)),
        )

    def test_namedtuple(self) -> None:
        self.assertRoundTrip(Point, Point(1, 2), '01:02')
        key_type = make_key_type(Point)
        self.assertIs(type(key_type.from_text('01:02')), Point)
        # plain tuples with the right size are accepted too
        self.assertEqual(key_type.to_text((1, 2)), '01:02')
        with self.assertRaises(SerializationTypeError):
            key_type.to_text((1, 2, 3))
        with self.assertRaises(SerializationValueError):
            key_type.to_text(Point(1, 256))

    def test_pydantic_model(self) -> None:
        self.assertRoundTrip(Version, Version(major=1, minor=2, label='rc'), '01:02:rc')
        key_type = make_key_type(Version)
        with self.assertRaises(SerializationTypeError):
            key_type.to_text((1, 2, 'rc'))

    def test_model_validation_on_decode(self) -> None:
        self.assertRoundTrip(Threshold, Threshold(name='cpu', limit=11), 'cpu:800000000000000b')
        with self.assertRaises(BadDataError) as cm:
            make_key_type(Threshold).from_text('cpu:8000000000000001')
        self.assertEqual(cm.exception.index, 0)
        self.assertEqual(cm.exception.expected, 'Threshold')
        with self.assertRaises(BadDataError) as cm:
            make_key_type(tuple[str, Threshold]).from_text('x:cpu:8000000000000001')
        self.assertEqual(cm.exception.index, 1)

    def test_dataclass_validation_on_decode(self) -> None:
        self.assertRoundTrip(Range, Range(1, 5), '01:05')
        with self.assertRaises(BadDataError) as cm:
            make_key_type(tuple[bool, Range]).from_text('true:05:01')
        self.assertEqual(cm.exception.index, 1)
        self.assertEqual(cm.exception.expected, 'Range')

    def test_dataclass_value_type(self) -> None:
        key_type = make_key_type(AccountId)
        with self.assertRaises(SerializationTypeError):
            key_type.to_text(('abc', 1234))
        with self.assertRaises(SerializationValueError):
            key_type.to_text(AccountId('abc', -1))
        with self.assertRaises(SerializationTypeError):
            key_type.check_value(AccountId('abc', 'x'))  # type: ignore[arg-type]

    def test_nested_records(self) -> None:
        value = Entry(AccountId('abc', 7), Status.Active, Point(3, 4), 0.5)
        text = self.assertRoundTrip(Entry, value)
        self.assertEqual(text, 'abc:00000007:Active:03:04:bf000000')
        self.assertEqual(make_key_type(Entry).num_components(), 6)

    def test_unit_records(self) -> None:
        self.assertRoundTrip(Empty, Empty(), '')
        self.assertRoundTrip(Nothing, Nothing(), '')
        self.assertRoundTrip(tuple[str, Empty, Nothing, Uint8], ('x', Empty(), Nothing(), 1), 'x:01')
        self.assertEqual(make_key_type(Empty).num_components(), 0)

    def test_enum_encodes_member_name(self) -> None:
        self.assertRoundTrip(Status, Status.Active, 'Active')
        self.assertRoundTrip(Level, Level.LOW, 'LOW')
        self.assertRoundTrip(Color, Color.BLUE, 'BLUE')
        self.assertRoundTrip(tuple[str, Status], ('user', Status.Archived), 'user:Archived')

    def test_enum_orders_by_name(self) -> None:
        self.assertKeysOrdered(Status, [Status.Active, Status.Archived, Status.Inactive])

    def test_enum_unknown_name(self) -> None:
        key_type = make_key_type(Status)
        for text in ['Deleted', 'active', 'ACTIVE', '1', '']:
            with self.assertRaises(BadDataError) as cm:
                key_type.from_text(text)
            self.assertEqual(cm.exception.index, 0)
            self.assertEqual(cm.exception.expected, 'Status member name')

    def test_enum_alias(self) -> None:
        key_type = make_key_type(Flag)
        self.assertEqual(key_type.to_text(Flag.ENABLED), 'ON')
        self.assertIs(key_type.from_text('ON'), Flag.ON)
        with self.assertRaises(BadDataError):
            key_type.from_text('ENABLED')

    def test_enum_value_type(self) -> None:
        key_type = make_key_type(Status)
        with self.assertRaises(SerializationTypeError):
            key_type.to_text('Active')
        with self.assertRaises(SerializationTypeError):
            key_type.to_text(Level.HIGH)

    def test_init_false_fields_are_rejected(self) -> None:
        with self.assertRaises(UnsupportedTypeError):
            make_key_type(Audited)

    def test_records_order_like_tuples(self) -> None:
        self.assertKeysOrdered(AccountId, [
            AccountId('abc', 0),
            AccountId('abc', 1),
            AccountId('abc', 2**32 - 1),
            AccountId('abd', 0),
            AccountId('b', 0),
        ])


if __name__ == '__main__':
    unittest.main()
