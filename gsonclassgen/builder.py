from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from .inference import array_depth, is_custom_type, resolve_type
from .models import JavaClass, JavaField
from .naming import depluralize, sanitize_field_name

_LOGGER = logging.getLogger("gsonclassgen.builder")


class SampleError(ValueError):
    """Raised when a sample document has no object shape to infer from."""


class EmptySampleError(SampleError):
    pass


def build_field(key: str, value: Any) -> JavaField:
    depth = array_depth(value)
    java_type = resolve_type(key, value)
    return JavaField(
        json_key=key,
        name=sanitize_field_name(key, depth > 0),
        java_type=java_type,
        array_depth=depth,
        custom_type=is_custom_type(java_type),
    )


def nested_class_name(field: JavaField) -> str:
    if field.is_array:
        return depluralize(field.java_type)
    return field.java_type


def build_class(class_name: str, sample: Any, depth: int = 0) -> JavaClass:
    if isinstance(sample, list):
        if not sample:
            raise EmptySampleError(
                f"Cannot infer class {class_name}: the sample array is empty"
            )
        # arrays are homogeneous, the first element defines the shape
        shape = build_class(class_name, sample[0], depth)
        return JavaClass(
            class_name=class_name,
            fields=shape.fields,
            nested_classes=shape.nested_classes,
            depth=depth,
        )

    if not isinstance(sample, dict):
        raise SampleError(
            f"Cannot infer class {class_name}: expected a JSON object or array, "
            f"got {type(sample).__name__}"
        )

    fields: list[JavaField] = []
    nested_classes: list[JavaClass] = []
    for key, value in sample.items():
        java_field = build_field(key, value)
        if java_field.custom_type:
            # the field type must name the nested class exactly
            java_field = replace(java_field, java_type=nested_class_name(java_field))
            nested_classes.append(build_class(java_field.java_type, value, depth + 1))
        fields.append(java_field)

    _LOGGER.debug(
        "Built class %s (depth %d) with %d fields and %d nested classes",
        class_name,
        depth,
        len(fields),
        len(nested_classes),
    )
    return JavaClass(
        class_name=class_name,
        fields=tuple(fields),
        nested_classes=tuple(nested_classes),
        depth=depth,
    )
