from gsonclassgen.builder import build_class
from gsonclassgen.config import OutputOptions
from gsonclassgen.emitter import SERIALIZED_NAME_IMPORT, render_class, render_source


def _user():
    return build_class("User", {"id": 1, "name": "x"})


def test_render_default_class():
    assert render_class(_user()) == (
        "public final class User\n"
        "{\n"
        "\n"
        '\t@SerializedName("id")\n'
        "\tprivate int id;\n"
        "\n"
        '\t@SerializedName("name")\n'
        "\tprivate String name;\n"
        "}\n"
    )


def test_render_source_starts_with_header():
    source = render_source(_user())
    assert source.startswith(SERIALIZED_NAME_IMPORT + "\n\npublic final class User\n{\n")


def test_serialized_name_keeps_original_key():
    root = build_class("Root", {"first-name": "x", "say \"hi\"": 1})
    source = render_class(root)
    assert '\t@SerializedName("first-name")\n\tprivate String firstName;' in source
    assert '@SerializedName("say \\"hi\\"")' in source


def test_nested_classes_are_static_and_indented():
    root = build_class("Root", {"address": {"city": "NYC", "geo": {"lat": 1.5}}})
    source = render_class(root)
    assert "\n\tpublic static final class Address\n\t{\n" in source
    assert '\t\t@SerializedName("city")\n\t\tprivate String city;' in source
    assert "\n\t\tpublic static final class Geo\n\t\t{\n" in source
    assert "\t\t\tprivate float lat;" in source
    assert source.endswith("\t\t}\n\t}\n}\n")


def test_field_constructor():
    source = render_class(_user(), OutputOptions(field_constructor=True))
    assert (
        "\tpublic User(final int id, final String name)\n"
        "\t{\n"
        "\t\tthis.id = id;\n"
        "\t\tthis.name = name;\n"
        "\t}\n"
    ) in source
    assert "public User()" not in source


def test_final_fields_delegate_to_field_constructor():
    source = render_class(_user(), OutputOptions(final_fields=True, field_constructor=True))
    assert "\tprivate final int id;" in source
    assert "\tpublic User()\n\t{\n\t\tthis(0, null);\n\t}\n" in source


def test_final_fields_without_constructor_assign_defaults():
    root = build_class("Flags", {"on": True, "ratio": 0.5, "tags": [1]})
    source = render_class(root, OutputOptions(final_fields=True))
    assert (
        "\tpublic Flags()\n"
        "\t{\n"
        "\t\ton = false;\n"
        "\t\tratio = 0.0f;\n"
        "\t\ttags = null;\n"
        "\t}\n"
    ) in source


def test_boxed_primitives():
    root = build_class("Box", {"on": True, "count": 2, "ratio": 0.5, "ids": [1]})
    opts = OutputOptions(boxed_primitives=True, final_fields=True, field_constructor=True)
    source = render_class(root, opts)
    assert "\tprivate final Boolean on;" in source
    assert "\tprivate final Integer count;" in source
    assert "\tprivate final Float ratio;" in source
    assert "\tprivate final Integer[] ids;" in source
    assert "\t\tthis(null, null, null, null);" in source


def test_getters_and_setters():
    source = render_class(_user(), OutputOptions(getters=True, setters=True))
    assert "\tpublic final int getId()\n\t{\n\t\treturn id;\n\t}\n" in source
    assert (
        "\tpublic final void setName(final String name)\n"
        "\t{\n"
        "\t\tthis.name = name;\n"
        "\t}\n"
    ) in source


def test_final_fields_suppress_setters():
    source = render_class(_user(), OutputOptions(getters=True, setters=True, final_fields=True))
    assert "getName()" in source
    assert "setName(" not in source


def test_empty_class_renders():
    assert render_class(build_class("Empty", {})) == "public final class Empty\n{\n}\n"
