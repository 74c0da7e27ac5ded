def normalize_to_minus1_plus1(value: float, min_val: float, max_val: float) -> float:
    span = max_val - min_val
    if span == 0:
        return 0.0
    return 2.0 * (value - min_val) / span - 1.0


def denormalize_from_minus1_plus1(value: float, min_val: float, max_val: float) -> float:
    return min_val + (value + 1.0) / 2.0 * (max_val - min_val)
