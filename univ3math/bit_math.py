"""Most and least significant bit of unsigned integers."""


def most_significant_bit(x):
    """Return the index of the most significant set bit of ``x``.

    Raises ``ValueError`` when ``x`` is not a positive integer.
    """
    if x <= 0:
        raise ValueError("overflow: most significant bit of a non-positive value")
    return x.bit_length() - 1


def least_significant_bit(x):
    """Return the index of the least significant set bit of ``x``.

    Raises ``ValueError`` when ``x`` is not a positive integer.
    """
    if x <= 0:
        raise ValueError("least significant bit of a non-positive value")
    return (x & -x).bit_length() - 1