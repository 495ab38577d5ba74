"""Car class for a named vehicle."""


class Car:
    """A vehicle identified by name."""

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        """Name given at construction. Read-only."""
        return self._name

    def drive(self) -> None:
        """Print the driving noise."""
        print("vroooom")

    def get_name(self) -> str:
        """Name of the car. Same value as the ``name`` property."""
        return self._name
