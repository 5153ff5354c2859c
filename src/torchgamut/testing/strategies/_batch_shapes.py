from typing import Tuple

import hypothesis.strategies


@hypothesis.strategies.composite
def batch_shapes(
    draw: hypothesis.strategies.DrawFn,
    min_dims: int = 0,
    max_dims: int = 3,
    min_side: int = 1,
    max_side: int = 6,
) -> Tuple[int, ...]:
    """Strategy for leading batch shapes, excluding the channel dimension."""
    ndims = draw(
        hypothesis.strategies.integers(min_value=min_dims, max_value=max_dims)
    )
    return tuple(
        draw(
            hypothesis.strategies.integers(
                min_value=min_side, max_value=max_side
            )
        )
        for _ in range(ndims)
    )
