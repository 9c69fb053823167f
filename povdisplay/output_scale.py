"""Per-LED output scaling that balances brightness across the radius."""

from __future__ import annotations

MAX_RADIAL_BOOST = 3.0


def compute_output_scale(
    max_leds: int, num_leds: int, radial_balance: bool
) -> tuple[list[int], bool]:
    """Return per-LED scales (0..255) and whether any LED is scaled below 255."""
    scales = [255] * max_leds

    if radial_balance and num_leds > 1:
        floor = 1.0 / MAX_RADIAL_BOOST
        r_max = num_leds - 0.5
        for i in range(min(num_leds, max_leds)):
            r_norm = max((i + 0.5) / r_max, floor)
            scales[i] = int(r_norm * 255.0 + 0.5)

    return scales, any(s < 255 for s in scales)