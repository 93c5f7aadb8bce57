"""
single tile value on the board
"""
import operator


class Tile:
    """
    wrapper around one numeric tile value

    0 means the cell is empty. tiles carry no identity beyond their value,
    so two tiles with the same value are equal.
    """

    __slots__ = ('_value',)

    def __init__(self, value=0):
        if isinstance(value, Tile):
            value = value.value()
        if isinstance(value, bool):
            raise TypeError("Tile value must be an int, got bool")
        try:
            # accepts numpy integers as well as int
            value = operator.index(value)
        except TypeError:
            raise TypeError(f"Tile value must be an int, got {type(value).__name__}") from None
        if value < 0:
            raise ValueError(f"Tile value must be non-negative, got {value}")
        self._value = value

    def value(self):
        return self._value

    def is_empty(self):
        return self._value == 0

    def merge_with(self, other):
        """combine two equal tiles into one holding their sum"""
        other = Tile(other)
        if self._value != other._value:
            raise ValueError(f"cannot merge unequal tiles {self._value} and {other._value}")
        return Tile(self._value + other._value)

    def __int__(self):
        return self._value

    def __index__(self):
        return self._value

    def __bool__(self):
        return self._value != 0

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self._value == other._value
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return f"Tile({self._value})"
