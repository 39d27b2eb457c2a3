from __future__ import annotations

import json

from .config import OutputOptions
from .models import JavaClass, JavaField

SERIALIZED_NAME_IMPORT = "import com.google.gson.annotations.SerializedName;"


def _indent(depth: int) -> str:
    return "\t" * depth


def _java_string(text: str) -> str:
    # JSON string escapes are valid Java string literal escapes
    return json.dumps(text, ensure_ascii=False)


def _class_declaration(java_class: JavaClass) -> str:
    prefix = "public static" if java_class.is_nested else "public"
    return f"{prefix} final class {java_class.class_name}"


def _field_lines(field: JavaField, tabs: str, opts: OutputOptions) -> list[str]:
    modifiers = "private final" if opts.final_fields else "private"
    return [
        "",
        f"{tabs}@SerializedName({_java_string(field.json_key)})",
        f"{tabs}{modifiers} {field.type_definition(opts.boxed_primitives)} {field.name};",
    ]


def _constructor_lines(java_class: JavaClass, tabs: str, opts: OutputOptions) -> list[str]:
    lines: list[str] = []
    body_tabs = tabs + "\t"
    boxed = opts.boxed_primitives

    if opts.field_constructor:
        parameters = ", ".join(
            f"final {f.type_definition(boxed)} {f.name}" for f in java_class.fields
        )
        lines += ["", f"{tabs}public {java_class.class_name}({parameters})", f"{tabs}{{"]
        lines += [f"{body_tabs}this.{f.name} = {f.name};" for f in java_class.fields]
        lines.append(f"{tabs}}}")

    # final fields must be assigned, so a no-arg constructor is always emitted
    if opts.final_fields:
        lines += ["", f"{tabs}public {java_class.class_name}()", f"{tabs}{{"]
        if opts.field_constructor:
            arguments = ", ".join(f.default_value(boxed) for f in java_class.fields)
            lines.append(f"{body_tabs}this({arguments});")
        else:
            lines += [
                f"{body_tabs}{f.name} = {f.default_value(boxed)};" for f in java_class.fields
            ]
        lines.append(f"{tabs}}}")
    return lines


def _accessor_lines(field: JavaField, tabs: str, opts: OutputOptions) -> list[str]:
    lines: list[str] = []
    type_definition = field.type_definition(opts.boxed_primitives)
    if opts.getters:
        lines += [
            "",
            f"{tabs}public final {type_definition} get{field.accessor_name}()",
            f"{tabs}{{",
            f"{tabs}\treturn {field.name};",
            f"{tabs}}}",
        ]
    if opts.setters:
        lines += [
            "",
            f"{tabs}public final void set{field.accessor_name}(final {type_definition} {field.name})",
            f"{tabs}{{",
            f"{tabs}\tthis.{field.name} = {field.name};",
            f"{tabs}}}",
        ]
    return lines


def class_lines(java_class: JavaClass, opts: OutputOptions) -> list[str]:
    tabs = _indent(java_class.depth)
    member_tabs = _indent(java_class.depth + 1)

    lines = [f"{tabs}{_class_declaration(java_class)}", f"{tabs}{{"]
    for field in java_class.fields:
        lines += _field_lines(field, member_tabs, opts)
    lines += _constructor_lines(java_class, member_tabs, opts)
    for field in java_class.fields:
        lines += _accessor_lines(field, member_tabs, opts)
    for nested in java_class.nested_classes:
        lines.append("")
        lines += class_lines(nested, opts)
    lines.append(f"{tabs}}}")
    return lines


def render_class(java_class: JavaClass, opts: OutputOptions | None = None) -> str:
    opts = opts or OutputOptions()
    return "\n".join(class_lines(java_class, opts)) + "\n"


def render_source(java_class: JavaClass, opts: OutputOptions | None = None) -> str:
    return f"{SERIALIZED_NAME_IMPORT}\n\n{render_class(java_class, opts)}"
