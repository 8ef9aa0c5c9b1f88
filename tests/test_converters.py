"""Tests for scalar converters and the converter registry."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from fractions import Fraction

import pytest

from savable.codec.converters import ConverterRegistry, ScalarFieldConverter
from savable.codec.fields import FieldDescriptor
from savable.codec.reader import YAMLObjectReader
from savable.codec.writer import YAMLObjectWriter
from savable.demo import Address, Person
from savable.entity import SavableObject
from savable.errors import MalformedDocumentError


class DateConverter:
    def can_convert(self, field):
        return field.type is date

    def to_line(self, source, field):
        return f"{field.name}: {field.get(source).isoformat()}"

    def from_text(self, field, text):
        return date.fromisoformat(text)


@dataclass
class Meeting(SavableObject):
    topic: str | None = None
    day: date = date(2000, 1, 1)


@pytest.fixture
def converter() -> ScalarFieldConverter:
    return ScalarFieldConverter()


class TestCanConvert:
    @pytest.mark.parametrize("tp", [str, int, float, bool, complex, Decimal, Fraction])
    def test_scalars(self, converter, tp):
        assert converter.can_convert(FieldDescriptor("x", tp))

    def test_composite_rejected(self, converter):
        assert not converter.can_convert(FieldDescriptor("address", Address))

    def test_non_type_rejected(self, converter):
        assert not converter.can_convert(FieldDescriptor("x", "str"))


class TestToLine:
    def test_renders_value(self, converter):
        person = Person(firstName="Ann")
        assert converter.to_line(person, FieldDescriptor("firstName", str)) == "firstName: Ann"

    def test_none_renders_null(self, converter):
        assert converter.to_line(Person(), FieldDescriptor("lastName", str)) == "lastName: null"

    def test_unsupported_field_raises(self, converter):
        with pytest.raises(ValueError, match="can't convert"):
            converter.to_line(Person(), FieldDescriptor("address", Address))


class TestFromText:
    def test_int(self, converter):
        assert converter.from_text(FieldDescriptor("n", int), "42") == 42

    def test_bool(self, converter):
        assert converter.from_text(FieldDescriptor("b", bool), "False") is False
        assert converter.from_text(FieldDescriptor("b", bool), "true") is True

    def test_decimal(self, converter):
        assert converter.from_text(FieldDescriptor("d", Decimal), "1.10") == Decimal("1.10")

    def test_null(self, converter):
        assert converter.from_text(FieldDescriptor("n", int), "null") is None

    def test_bad_int(self, converter):
        with pytest.raises(MalformedDocumentError):
            converter.from_text(FieldDescriptor("n", int), "abc")

    def test_bad_bool(self, converter):
        with pytest.raises(MalformedDocumentError):
            converter.from_text(FieldDescriptor("b", bool), "maybe")


class TestConverterRegistry:
    def test_no_match_means_composite(self):
        registry = ConverterRegistry()
        assert registry.resolve(FieldDescriptor("address", Address)) is None
        assert not registry.is_scalar(FieldDescriptor("address", Address))

    def test_first_match_wins(self):
        first, second = ScalarFieldConverter(), ScalarFieldConverter()
        registry = ConverterRegistry([first, second])
        assert registry.resolve(FieldDescriptor("x", int)) is first

    def test_custom_converter_roundtrip(self):
        registry = ConverterRegistry()
        registry.register(DateConverter())
        writer = YAMLObjectWriter(converters=registry)
        reader = YAMLObjectReader(converters=registry)

        meeting = Meeting(topic="Plan", day=date(2026, 3, 14))
        meeting.id = 9
        text = writer.serialize(meeting)
        assert "  day: 2026-03-14" in text.splitlines()

        loaded = reader.loads(text)
        assert loaded == meeting
        assert loaded.id == 9
