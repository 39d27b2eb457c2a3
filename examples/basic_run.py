from __future__ import annotations

import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from gsonclassgen.api import parse
from gsonclassgen.config import OutputOptions
from gsonclassgen.emitter import render_source


def main() -> None:
    sample = {
        "id": 1,
        "name": "Ajay",
        "email": "ajay@example.com",
        "isActive": True,
        "salary": 55000.75,
        "address": {
            "street": "MG Road",
            "city": "Bangalore",
            "zip": 560001,
        },
        "skills": ["Java", "Python", "Kafka"],
        "projects": [{"title": "search", "tags": ["a", "b"]}],
    }

    employee = parse(sample, "Employee")
    for java_class in employee.walk():
        print(f"{java_class.class_name}: {[f.name for f in java_class.fields]}")

    options = OutputOptions(getters=True, final_fields=True, field_constructor=True)
    print(render_source(employee, options))


if __name__ == "__main__":
    main()
