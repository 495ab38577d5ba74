#!/usr/bin/env python3
"""Validate car YAML files against the schema."""
import sys
from pathlib import Path

import yaml
from jsonschema import validate, ValidationError


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def check_car_name(data) -> list[str]:
    """
    Check the car's name is text.

    Unquoted YAML scalars such as ``42`` or ``yes`` load as numbers or
    booleans; report those with the offending value so the fix is obvious.
    Missing or malformed structure is left to the schema.
    """
    car = data.get("car") if isinstance(data, dict) else None
    if not isinstance(car, dict) or "name" not in car:
        return []
    name = car["name"]
    if isinstance(name, str):
        return []
    return [
        f"Car name must be a string, got {type(name).__name__}: {name!r}",
        "  hint: quote the name, e.g. name: '42'",
    ]


def validate_car_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single car YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        errors.extend(check_car_name(data))
        if not errors:
            validate(instance=data, schema=schema)
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except Exception as e:
        errors.append(f"Error: {e}")
    return errors


def main(argv=None):
    """Validate each car file given on the command line."""
    paths = [Path(p) for p in (sys.argv[1:] if argv is None else argv)]
    if not paths:
        print("Usage: validate_yaml.py FILE [FILE ...]")
        return 1

    schema = load_schema()
    all_valid = True
    for filepath in paths:
        errors = validate_car_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
