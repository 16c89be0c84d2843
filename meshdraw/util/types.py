import math
import numbers


def wrap_number_like(value):
    """ Try to use the value as a number.

    Instances of numbers.Number are passed through unchanged,
    float is returned if a number supports conversion to float, otherwise an exception
    is raised. """
    if isinstance(value, numbers.Number):
        return value
    else:
        try:
            return float(value)
        except (TypeError, ValueError):
            raise TypeError(
                "Value must be instance of numbers.Number or support conversion to float to be number-like"
            )


def _wrap_channel(value):
    channel = wrap_number_like(value)
    if not math.isfinite(channel):
        raise ValueError("Colour channel must be finite, got {}".format(channel))
    channel = int(round(channel))
    if not 0 <= channel <= 255:
        raise ValueError("Colour channel must be between 0 and 255, got {}".format(channel))
    return channel


def wrap_colour_like(value):
    """ Try to use value as an RGBA colour.

    Colour-like is an iterable of three or four numbers in range 0-255.
    RGB colours are made opaque. Returns a tuple of four ints. """

    try:
        it = iter(value)
    except TypeError:
        raise TypeError("Value must be iterable to be colour-like")

    if isinstance(value, str):
        raise TypeError("Strings are not colour-like")

    channels = [_wrap_channel(x) for x in it]

    if len(channels) == 3:
        channels.append(255)
    elif len(channels) != 4:
        raise TypeError("Value must have three or four items to be colour-like")

    return tuple(channels)


def wrap_size_like(value):
    """ Try to use value as a (width, height) pair of positive integers. """
    try:
        width, height = value
    except (TypeError, ValueError):
        raise TypeError("Value must have exactly two items to be size-like")

    wrapped = []
    for x in (width, height):
        x = wrap_number_like(x)
        if not math.isfinite(x) or x != int(x) or x <= 0:
            raise ValueError("Size must consist of positive integers, got {}".format(value))
        wrapped.append(int(x))

    return tuple(wrapped)
