"""
Validation functions for attrs.
"""

import math

from attrs import define

from screenshot_beautify.errors import InvalidConfig

__all__ = ["range_", "non_negative", "finite", "instance_of"]


@define(repr=False, slots=True, hash=True)
class _RangeValidator:
    minimum: float
    maximum: float

    def __call__(self, inst, attr, value):
        try:
            in_range = self.minimum <= value and value <= self.maximum
        except TypeError:
            in_range = False

        if not in_range:
            raise InvalidConfig(
                "'{name}' must be in range [{minimum!r}, {maximum!r}], got {value!r}".format(
                    name=attr.name,
                    minimum=self.minimum,
                    maximum=self.maximum,
                    value=value,
                )
            )

    def __repr__(self):
        return "<range_ validator with [{minimum!r}, {maximum!r}]>".format(
            minimum=self.minimum, maximum=self.maximum
        )


def range_(minimum, maximum):
    """
    A validator that raises a :exc:`~screenshot_beautify.errors.InvalidConfig`
    if the initializer is called with a value that does not belong in the
    [minimum, maximum] range. The check is performed using
    ``minimum <= value and value <= maximum``
    """
    return _RangeValidator(minimum, maximum)


def finite(inst, attr, value):
    """Reject NaN, infinities and non-numbers."""
    try:
        ok = math.isfinite(value)
    except TypeError:
        ok = False
    if not ok:
        raise InvalidConfig("'%s' must be a finite number, got %r" % (attr.name, value))


def non_negative(inst, attr, value):
    """Reject negative or non-finite sizes."""
    finite(inst, attr, value)
    if value < 0:
        raise InvalidConfig("'%s' must be non-negative, got %r" % (attr.name, value))


@define(repr=False, slots=True, hash=True)
class _InstanceOfValidator:
    cls: type
    allow_none: bool = False

    def __call__(self, inst, attr, value):
        if value is None and self.allow_none:
            return
        if not isinstance(value, self.cls):
            raise InvalidConfig(
                "'{name}' must be a {type}, got {value!r}".format(
                    name=attr.name, type=self.cls.__name__, value=value
                )
            )

    def __repr__(self):
        return "<instance_of validator for {cls!r}>".format(cls=self.cls)


def instance_of(cls, allow_none=False):
    """
    A validator that raises a :exc:`~screenshot_beautify.errors.InvalidConfig`
    if the initializer is called with a value that is not an instance of
    ``cls`` (or ``None`` when ``allow_none`` is set).
    """
    return _InstanceOfValidator(cls, allow_none)
