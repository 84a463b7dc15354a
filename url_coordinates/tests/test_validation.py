import math

import pytest

from url_coordinates.core.reference_systems import ReferenceSystemPolicy, ReferenceSystemRegistry
from url_coordinates.core.validation import (
    ValueValidator,
    resolve_wkid,
    validate_coordinate_value,
    validate_wkid_value,
)
from url_coordinates.errors import (
    AxisOutOfRangeError,
    CoordinateNotANumberError,
    ReferenceSystemNotANumberError,
    ReferenceSystemTooLongError,
    ReferenceSystemTooShortError,
)


class TestCoordinateValue:
    """Тесты проверки значения координаты"""

    @pytest.mark.parametrize("value,axis,wkid", [
        ("52.0", 0, 4326),
        ("-90", 0, 4326),
        ("90", 0, 4326),
        ("180", 1, 4326),
        ("-180", 1, 4326),
        ("500000", 0, 25833),
        ("6000000", 1, 25833),
        ("123456789", 0, 3857),
        ("-123456789", 1, None),
    ])
    def test_valid_values(self, value, axis, wkid):
        assert validate_coordinate_value(value, axis, wkid) == float(value)

    @pytest.mark.parametrize("value,axis,wkid,bounds", [
        ("95.0", 0, 4326, (-90.0, 90.0)),
        ("-90.1", 0, 4326, (-90.0, 90.0)),
        ("180.5", 1, 4326, (-180.0, 180.0)),
        ("4102893.56", 0, 25833, (-2465144.80, 4102893.55)),
        ("776625.75", 1, 25833, (776625.76, 9408555.22)),
    ])
    def test_out_of_range(self, value, axis, wkid, bounds):
        with pytest.raises(AxisOutOfRangeError) as exc_info:
            validate_coordinate_value(value, axis, wkid)
        assert exc_info.value.axis == axis
        assert exc_info.value.bounds == bounds

    def test_latitude_range_applies_to_first_axis(self):
        """Для 4326 первая ось ограничена [-90, 90], вторая [-180, 180]"""
        with pytest.raises(AxisOutOfRangeError):
            validate_coordinate_value("120", 0, 4326)
        assert validate_coordinate_value("120", 1, 4326) == 120.0

    def test_not_a_number(self):
        with pytest.raises(CoordinateNotANumberError) as exc_info:
            validate_coordinate_value("abc", 1, 4326)
        assert exc_info.value.axis == 1

    def test_custom_registry_bounds(self):
        registry = ReferenceSystemRegistry([
            ReferenceSystemPolicy(wkid=31467, axis0_bounds=(3e6, 4e6), axis1_bounds=(5e6, 6e6)),
        ])
        with pytest.raises(AxisOutOfRangeError):
            validate_coordinate_value("100", 0, 31467, registry)
        # без политики 4326 диапазон не ограничен
        assert validate_coordinate_value("500", 0, 4326, registry) == 500.0


class TestWkidValue:
    """Тесты проверки WKID"""

    @pytest.mark.parametrize("value,expected", [
        ("4326", 4326),
        ("25833", 25833),
        ("4326abc", 4326),
    ])
    def test_valid(self, value, expected):
        assert validate_wkid_value(value) == expected

    def test_not_a_number(self):
        with pytest.raises(ReferenceSystemNotANumberError):
            validate_wkid_value("abcd")

    @pytest.mark.parametrize("value", ["123", "1", "43.26"])
    def test_too_short(self, value):
        with pytest.raises(ReferenceSystemTooShortError):
            validate_wkid_value(value)

    @pytest.mark.parametrize("value", ["123456", "1234567"])
    def test_too_long(self, value):
        with pytest.raises(ReferenceSystemTooLongError):
            validate_wkid_value(value)


class TestValueValidator:
    """Тесты проверки всего кортежа"""

    def test_valid_tuple(self):
        ValueValidator().validate(["52.0", "7.5", "4326"])

    def test_first_axis_checked_first(self):
        with pytest.raises(CoordinateNotANumberError) as exc_info:
            ValueValidator().validate(["abc", "500", "12"])
        assert exc_info.value.axis == 0

    def test_axes_checked_before_wkid(self):
        with pytest.raises(AxisOutOfRangeError):
            ValueValidator().validate(["95.0", "10.0", "4326"])

    def test_wkid_checked_after_axes(self):
        with pytest.raises(ReferenceSystemTooShortError):
            ValueValidator().validate(["1.0", "2.0", "123"])

    def test_unparsable_wkid_leaves_axes_unrestricted(self):
        with pytest.raises(ReferenceSystemNotANumberError):
            ValueValidator().validate(["1000", "2000", "abcd"])

    def test_pair_without_wkid(self):
        ValueValidator().validate(["1000", "-2000"])

    def test_resolve_wkid(self):
        assert resolve_wkid(["1", "2", "25833"]) == 25833
        assert resolve_wkid(["1", "2"]) is None
        assert resolve_wkid(["1", "2", "x"]) is None

    def test_error_message_contains_bounds(self):
        with pytest.raises(AxisOutOfRangeError) as exc_info:
            ValueValidator().validate(["1.0", "-181", "4326"])
        assert str(exc_info.value).endswith("[-180, 180].")
        assert not math.isinf(exc_info.value.value)
