import hypothesis.strategies


def channel_values(
    min_value: float = 0.0,
    max_value: float = 1.0,
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for finite channel values.

    The default range is the nominal [0, 1]; widen it to exercise extended
    range behavior.
    """
    return hypothesis.strategies.floats(
        min_value=min_value,
        max_value=max_value,
        allow_nan=False,
        allow_infinity=False,
    )
