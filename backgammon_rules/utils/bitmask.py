# backgammon_rules/utils/bitmask.py

def bits_from_indices(indices):
    """Build a mask with one bit set per point index (0-based)."""
    mask = 0
    for i in indices:
        mask |= 1 << int(i)
    return mask


def indices_from_bits(mask: int) -> list[int]:
    """Return the indices of all set bits, lowest first."""
    idxs = []
    mask = int(mask)
    while mask:
        lsb = mask & -mask
        idxs.append(lsb.bit_length() - 1)  # bit 0 = point 0
        mask &= mask - 1
    return idxs
