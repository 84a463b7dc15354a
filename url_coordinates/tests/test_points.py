import math

import pytest

from url_coordinates.core.points import MapCenterPoint, build_center_point
from url_coordinates.core.reference_systems import (
    AxisInterpretation,
    ReferenceSystemPolicy,
    ReferenceSystemRegistry,
    DEFAULT_POLICIES,
)
from url_coordinates.enhanced.exceptions import ConfigValidationError
from url_coordinates.errors import CoordinateNotANumberError, ReferenceSystemNotANumberError


class TestReferenceSystemRegistry:
    """Тесты реестра систем координат"""

    def test_builtin_policies(self):
        registry = ReferenceSystemRegistry()
        wgs84 = registry.get(4326)
        assert wgs84.axis0_bounds == (-90.0, 90.0)
        assert wgs84.axis1_bounds == (-180.0, 180.0)
        assert wgs84.interpretation is AxisInterpretation.LAT_LON

        utm = registry.get(25833)
        assert utm.axis0_bounds == (-2465144.80, 4102893.55)
        assert utm.axis1_bounds == (776625.76, 9408555.22)
        assert utm.interpretation is AxisInterpretation.XY

    @pytest.mark.parametrize("wkid", [3857, None])
    def test_unknown_wkid_unrestricted(self, wkid):
        policy = ReferenceSystemRegistry().get(wkid)
        assert policy.axis0_bounds == (-math.inf, math.inf)
        assert policy.axis1_bounds == (-math.inf, math.inf)
        assert policy.interpretation is AxisInterpretation.LAT_LON

    def test_register_new_system(self):
        registry = ReferenceSystemRegistry()
        registry.register(ReferenceSystemPolicy(
            wkid=25832,
            axis0_bounds=(-1e6, 2e6),
            axis1_bounds=(0, 1e7),
            interpretation=AxisInterpretation.XY,
        ))
        assert 25832 in registry
        assert len(registry) == len(DEFAULT_POLICIES) + 1

    def test_policy_from_dict(self):
        policy = ReferenceSystemPolicy.from_dict({
            "wkid": "25832",
            "axis0": [-1000000, 2000000],
            "axis1": [0, 10000000],
            "interpretation": "xy",
            "name": "ETRS89 / UTM 32N",
        })
        assert policy.wkid == 25832
        assert policy.axis1_bounds == (0.0, 10000000.0)
        assert policy.interpretation is AxisInterpretation.XY

    @pytest.mark.parametrize("data", [
        {"axis0": [0, 1]},
        {"wkid": 1234, "interpretation": "polar"},
        {"wkid": 1234, "axis0": [0, 1, 2]},
        {"wkid": 1234, "axis0": [5, 1]},
    ])
    def test_policy_from_invalid_dict(self, data):
        with pytest.raises(ConfigValidationError):
            ReferenceSystemPolicy.from_dict(data)


class TestBuildCenterPoint:
    """Тесты построения центра карты"""

    def test_latitude_longitude_point(self):
        point = build_center_point(["52.0", "7.5", "4326"], default_wkid=4326)
        assert point == MapCenterPoint(52.0, 7.5, 4326, AxisInterpretation.LAT_LON)
        assert point.latitude == 52.0
        assert point.longitude == 7.5
        assert point.x is None

    def test_projected_point(self):
        point = build_center_point(["500000", "6000000", "25833"], default_wkid=4326)
        assert point.is_projected
        assert point.x == 500000.0
        assert point.y == 6000000.0
        assert point.latitude is None
        assert point.to_dict() == {"x": 500000.0, "y": 6000000.0, "spatialReference": {"wkid": 25833}}

    def test_unknown_wkid_treated_as_latitude_longitude(self):
        point = build_center_point(["1.0", "2.0", "3857"], default_wkid=4326)
        assert point.latitude == 1.0
        assert point.wkid == 3857

    def test_missing_wkid_uses_default(self):
        point = build_center_point(["500000", "6000000"], default_wkid=25833)
        assert point.wkid == 25833
        assert point.is_projected

    def test_out_of_range_values_kept(self):
        point = build_center_point(["95.0", "500.0", "4326"], default_wkid=4326)
        assert (point.axis0, point.axis1) == (95.0, 500.0)

    def test_not_a_number(self):
        with pytest.raises(CoordinateNotANumberError):
            build_center_point(["52.0", "abc", "4326"], default_wkid=4326)
        with pytest.raises(ReferenceSystemNotANumberError):
            build_center_point(["52.0", "7.5", "abc"], default_wkid=4326)

    def test_custom_xy_system(self):
        registry = ReferenceSystemRegistry(list(DEFAULT_POLICIES) + [
            ReferenceSystemPolicy(wkid=25832, interpretation=AxisInterpretation.XY),
        ])
        point = build_center_point(["400000", "5700000", "25832"], default_wkid=4326, registry=registry)
        assert point.x == 400000.0

    def test_point_str(self):
        point = build_center_point(["52.0", "7.5", "4326"], default_wkid=4326)
        assert str(point) == "lat=52.0, lon=7.5 (WKID 4326)"
