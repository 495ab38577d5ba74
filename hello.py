#!/usr/bin/env python3
"""
Build a car, hand it off, print its name.

Usage:
  hello.py                       - prints "Honda"
  hello.py --car-file car.yaml   - prints the name from a car file
  hello.py --drive               - take it for a drive first
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from models import Car, Owned, load_car
from validate_yaml import load_schema, validate_car_file

DEFAULT_NAME = "Honda"


def print_name(car: Owned[Car]) -> None:
    """
    Print the car's name.

    Takes ownership of ``car``: the handle is released before returning and
    the caller gets nothing back.
    """
    with car:
        print(car.get().get_name())


def build_car(car_file: Optional[Path] = None) -> Car:
    """Car from the given file, or the default one."""
    if car_file is None:
        return Car(DEFAULT_NAME)
    return load_car(car_file)


def main(argv=None):
    """Build the car, move it into print_name. Returns the exit code."""
    parser = argparse.ArgumentParser(
        description="Move a car into a function and print its name",
    )
    parser.add_argument(
        "--car-file",
        type=Path,
        help="YAML file with the car to use (default: a Honda)",
    )
    parser.add_argument(
        "--drive",
        action="store_true",
        help="Drive the car before handing it off",
    )
    args = parser.parse_args(argv)

    if args.car_file is not None:
        if not args.car_file.exists():
            print(f"Error: File not found: {args.car_file}")
            return 1
        errors = validate_car_file(args.car_file, load_schema())
        if errors:
            print(f"Error: Invalid car file: {args.car_file}")
            for error in errors:
                print(f"  {error}")
            return 1

    try:
        car = Owned(build_car(args.car_file))
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if args.drive:
        car.get().drive()

    print_name(car.move())

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
