def fake_exponential(factor: int, numerator: int, denominator: int) -> int:
    """
    Approximate ``factor * e ** (numerator / denominator)`` using only integer
    arithmetic, by summing the Taylor series until a term truncates to zero.

    Every implementation must produce bit-identical results, so no floating point
    is involved at any step.
    """
    if factor < 0 or numerator < 0:
        raise ValueError(
            f"factor and numerator must be non-negative, got {factor} and {numerator}"
        )
    elif denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    i = 1
    output = 0
    numerator_accumulator = factor * denominator
    while numerator_accumulator > 0:
        output += numerator_accumulator
        numerator_accumulator = (numerator_accumulator * numerator) // (denominator * i)
        i += 1
    return output // denominator
