"""PLL output frequency calculation from the PLL frequency register fields."""

_U32 = 0xFFFFFFFF

_FIELD_LIMITS = {
    "mint": 0x3FF,
    "mfrac": 0x3FF,
    "q_field": 0x1F,
    "n_field": 0x1F,
}


def _check_field(name: str, value: int) -> None:
    limit = _FIELD_LIMITS[name]
    if not 0 <= value <= limit:
        raise ValueError(f"{name} must be in 0..{limit}, got {value}")


def pll_frequency(xtal: int, mint: int, mfrac: int, q_field: int, n_field: int) -> int:
    """Return the PLL frequency in Hz for a crystal and the raw register fields.

    ``mint`` and ``mfrac`` are the integer and fractional multiplier fields;
    ``q_field`` and ``n_field`` are the raw divider fields (the divider is the
    field value plus one).  Arithmetic is done in 32-bit unsigned integers.
    """
    if not 0 <= xtal <= _U32:
        raise ValueError(f"crystal frequency out of range: {xtal}")
    for name, value in (
        ("mint", mint),
        ("mfrac", mfrac),
        ("q_field", q_field),
        ("n_field", n_field),
    ):
        _check_field(name, value)

    q = q_field + 1
    n = n_field + 1

    xtal //= n
    f1 = mfrac // 32
    f2 = mfrac - f1 * 32

    result = (xtal * mint) & _U32
    result = (result + ((xtal * f1) & _U32) // 32) & _U32
    result = (result + ((xtal * f2) & _U32) // 1024) & _U32
    return result // q