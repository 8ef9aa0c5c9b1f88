"""Tests for field introspection."""

from dataclasses import dataclass
from typing import ClassVar, Optional

import pytest

from savable.codec.fields import FieldDescriptor, declared_fields, fields_by_name
from savable.codec.writer import YAMLObjectWriter
from savable.demo import Address, Person
from savable.entity import SavableObject


class Plain:
    label: str
    count: Optional[int]
    kind: ClassVar[str] = "plain"

    def __init__(self):
        self.label = "a"
        self.count = None


@dataclass
class Base(SavableObject):
    created: str | None = None


@dataclass
class Derived(Base):
    title: str | None = None
    size: int = 0


class Unset(SavableObject):
    name: str


class Guarded(SavableObject):
    secret: str

    def __getattribute__(self, name):
        if name == "secret":
            raise AttributeError("secret is write-only")
        return super().__getattribute__(name)


class TestDeclaredFields:
    def test_declaration_order(self):
        names = [f.name for f in declared_fields(Address)]
        assert names == ["street", "city", "stateCode", "postIndex"]

    def test_optional_unwrapped(self):
        fields = fields_by_name(Plain)
        assert fields["label"].type is str
        assert fields["count"].type is int

    def test_classvar_excluded(self):
        assert "kind" not in fields_by_name(Plain)

    def test_entity_id_excluded(self):
        assert "id" not in fields_by_name(Person)

    def test_base_fields_first(self):
        names = [f.name for f in declared_fields(Derived)]
        assert names == ["created", "title", "size"]

    def test_composite_type_resolved(self):
        assert fields_by_name(Person)["address"].type is Address


class TestFieldDescriptor:
    def test_get_and_set(self):
        field = FieldDescriptor("city", str)
        address = Address(city="X")
        assert field.get(address) == "X"
        field.set(address, "Y")
        assert address.city == "Y"

    def test_get_unset_attribute_raises(self):
        with pytest.raises(AttributeError):
            FieldDescriptor("name", str).get(Unset())

    def test_get_failing_accessor_raises(self):
        with pytest.raises(AttributeError):
            FieldDescriptor("secret", str).get(Guarded())

    def test_writer_does_not_hide_unset_field(self):
        with pytest.raises(AttributeError):
            YAMLObjectWriter().to_lines(Unset())

    def test_writer_does_not_hide_failing_accessor(self):
        with pytest.raises(AttributeError):
            YAMLObjectWriter().to_lines(Guarded())
