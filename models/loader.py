"""YAML loading utilities for car files."""

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .car import Car


def _parse_object(dct: Dict[str, Any]) -> Union[Car, dict]:
    """Parse dictionary into appropriate object type."""
    # Car object (inside 'car' key); non-text names stay raw for load_car to reject
    if "name" in dct and isinstance(dct["name"], str):
        return Car(dct["name"])
    return dct


def load_car(filename: Union[str, Path]) -> Car:
    """
    Load a car from a YAML file.

    Raises:
        ValueError: if the document has no ``car`` mapping, or the car's
            name is not a string.
    """
    with open(filename, "rb") as fp:
        json_data = json.dumps(yaml.load(fp, Loader=yaml.SafeLoader), indent=4)
        data = json.loads(json_data, object_hook=_parse_object)

    car = data.get("car") if isinstance(data, dict) else None
    if isinstance(car, Car):
        return car
    if isinstance(car, dict) and "name" in car:
        name = car["name"]
        raise ValueError(
            f"Car name must be a string in {filename}, "
            f"got {type(name).__name__}: {name!r}"
        )
    raise ValueError(f"No car defined in {filename}")
