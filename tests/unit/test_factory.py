# tests/unit/test_factory.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

import recfactory
from recfactory import Factory
from recfactory.core.errors import ArgumentError, ArityError, UnknownTypeError
from recfactory.core.factory import RecordFactory, is_type_name
from recfactory.core.record import Record


class TestIsTypeName:
    @pytest.mark.parametrize("value", ["Point", "P", "HTTPResponse", "Point3D", "Ünicode"])
    def test_type_names(self, value) -> None:
        assert is_type_name(value)

    @pytest.mark.parametrize("value", ["x", "point", "_Point", "3D", "", "Not Valid", "None", "True", 1, None])
    def test_not_type_names(self, value) -> None:
        assert not is_type_name(value)


class TestNamedTypes:
    def test_named_type_is_registered(self, factory: RecordFactory) -> None:
        point_type = factory("Point", "x", "y")
        assert point_type.__name__ == "Point"
        assert factory["Point"] is point_type
        assert factory.Point is point_type
        assert "Point" in factory
        assert factory.registry.lookup("Point") is point_type

    def test_name_is_not_a_field(self, point_type) -> None:
        assert point_type(1, 2).members == ["x", "y"]

    def test_explicit_name(self, factory: RecordFactory) -> None:
        pair_type = factory("left", "right", name="pair")
        assert pair_type.__name__ == "pair"
        assert factory["pair"] is pair_type
        assert pair_type(1, 2).members == ["left", "right"]

    def test_explicit_name_keeps_all_positionals(self, factory: RecordFactory) -> None:
        record_type = factory("Kind", "value", name="Tagged")
        assert record_type("a", 1).members == ["Kind", "value"]

    @pytest.mark.parametrize("name", ["", "not valid", 5])
    def test_invalid_explicit_name(self, factory: RecordFactory, name) -> None:
        with pytest.raises(ArgumentError):
            factory("x", name=name)

    def test_rebinding_a_name(self, factory: RecordFactory) -> None:
        first = factory("Point", "x", "y")
        second = factory("Point", "x", "y", "z")
        assert factory.Point is second
        assert first is not second
        assert first(1, 2) != second(1, 2, 3)


class TestAnonymousTypes:
    def test_not_registered(self, factory: RecordFactory) -> None:
        pair_type = factory("x", "y")
        assert pair_type.__name__ == "Anonymous"
        assert len(factory.registry) == 0

    def test_lookup_of_unregistered_name(self, factory: RecordFactory) -> None:
        with pytest.raises(UnknownTypeError):
            factory["Line"]
        with pytest.raises(AttributeError):
            factory.Line
        assert "Line" not in factory

    def test_private_attributes_not_looked_up(self, factory: RecordFactory) -> None:
        with pytest.raises(AttributeError):
            factory._missing


class TestEmptyTypes:
    def test_allowed_by_default(self, factory: RecordFactory) -> None:
        assert factory.allow_empty
        empty_type = factory("Empty")
        assert empty_type().size == 0
        assert factory.Empty is empty_type

    def test_anonymous_empty(self, factory: RecordFactory) -> None:
        assert factory()().to_a() == []

    def test_disallowed(self, strict_factory: RecordFactory) -> None:
        with pytest.raises(ArgumentError) as ctx:
            strict_factory("Empty")
        assert ctx.value.details == {"type_name": "Empty"}
        assert "Empty" not in strict_factory
        with pytest.raises(ArgumentError):
            strict_factory()


class TestExtensions:
    def test_extension_mapping(self, factory: RecordFactory) -> None:
        summed = factory("x", "y", extension={"sum": lambda self: self.x + self.y})
        assert summed(2, 5).sum() == 7

    def test_extension_class_on_named_type(self, factory: RecordFactory) -> None:
        class Money:
            CURRENCY = "EUR"

            def __str__(self):
                return f"{self.amount} {self.CURRENCY}"

        money_type = factory("Money", "amount", extension=Money)
        assert str(money_type(5)) == "5 EUR"
        assert factory.Money.CURRENCY == "EUR"

    def test_invalid_extension_does_not_register(self, factory: RecordFactory) -> None:
        with pytest.raises(ArgumentError):
            factory("Broken", "x", extension=3)
        assert "Broken" not in factory


class TestSharedRegistry:
    def test_factories_share_a_registry(self, registry) -> None:
        first = RecordFactory(registry=registry)
        second = RecordFactory(registry=registry)
        point_type = first("Point", "x", "y")
        assert second.Point is point_type

    def test_empty_registry_is_kept(self, registry) -> None:
        assert RecordFactory(registry=registry).registry is registry

    def test_factories_isolated_by_default(self) -> None:
        first = RecordFactory()
        second = RecordFactory()
        first("Point", "x", "y")
        assert "Point" not in second


class TestDefaultFactory:
    def test_module_level_factory(self) -> None:
        assert isinstance(Factory, RecordFactory)
        assert recfactory.Factory is Factory

    def test_usage_example(self) -> None:
        point_type = Factory("DefaultFactoryPoint", "x", "y")
        point = point_type(3, 4)

        assert point[0] == 3
        assert point["y"] == 4
        assert point.to_a() == [3, 4]
        assert point.members == ["x", "y"]
        assert point.size == 2
        assert point_type(3, 4) == point_type(3, 4)
        assert point.values_at(1, 0) == [4, 3]
        assert isinstance(point, Record)
        assert Factory.DefaultFactoryPoint is point_type
        Factory.registry.unbind("DefaultFactoryPoint")

    def test_arity_error_through_factory(self, point_type) -> None:
        with pytest.raises(ArityError):
            point_type(1, 2, 3)
