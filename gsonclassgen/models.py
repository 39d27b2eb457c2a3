from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .inference import BOXED_TYPES, DEFAULT_VALUES


@dataclass(frozen=True)
class JavaField:
    json_key: str
    name: str
    java_type: str
    array_depth: int = 0
    custom_type: bool = False

    @property
    def is_array(self) -> bool:
        return self.array_depth > 0

    @property
    def accessor_name(self) -> str:
        return self.name[:1].upper() + self.name[1:]

    def element_type(self, boxed: bool = False) -> str:
        if boxed:
            return BOXED_TYPES.get(self.java_type, self.java_type)
        return self.java_type

    def type_definition(self, boxed: bool = False) -> str:
        return self.element_type(boxed) + "[]" * self.array_depth

    def default_value(self, boxed: bool = False) -> str:
        # arrays and boxed values can only default to null
        if boxed or self.is_array:
            return "null"
        return DEFAULT_VALUES.get(self.java_type, "null")

    def to_dict(self) -> dict:
        return {
            "json_key": self.json_key,
            "name": self.name,
            "type": self.java_type,
            "array_depth": self.array_depth,
            "custom_type": self.custom_type,
        }


@dataclass(frozen=True)
class JavaClass:
    class_name: str
    fields: tuple[JavaField, ...] = ()
    nested_classes: tuple[JavaClass, ...] = ()
    depth: int = 0

    @property
    def is_nested(self) -> bool:
        return self.depth > 0

    def field_named(self, name: str) -> JavaField | None:
        for item in self.fields:
            if item.name == name:
                return item
        return None

    def walk(self) -> Iterator[JavaClass]:
        yield self
        for nested in self.nested_classes:
            yield from nested.walk()

    def to_dict(self) -> dict:
        return {
            "class_name": self.class_name,
            "depth": self.depth,
            "fields": [f.to_dict() for f in self.fields],
            "nested_classes": [c.to_dict() for c in self.nested_classes],
        }
