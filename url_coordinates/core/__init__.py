"""
Разбор, проверка и нормализация значения showCoord
"""

from .parsing import clean_input, split_tokens, check_structure, StructureResult
from .validation import ValueValidator, validate_coordinate_value, validate_wkid_value
from .points import MapCenterPoint, build_center_point
from .reference_systems import (
    AxisInterpretation,
    ReferenceSystemPolicy,
    ReferenceSystemRegistry,
    DEFAULT_POLICIES,
)

__all__ = [
    'clean_input',
    'split_tokens',
    'check_structure',
    'StructureResult',
    'ValueValidator',
    'validate_coordinate_value',
    'validate_wkid_value',
    'MapCenterPoint',
    'build_center_point',
    'AxisInterpretation',
    'ReferenceSystemPolicy',
    'ReferenceSystemRegistry',
    'DEFAULT_POLICIES',
]
