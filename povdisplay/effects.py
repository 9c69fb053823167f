"""Post-processing effects applied to the back framebuffer slices."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, replace

from povdisplay.param import Param, ParamOption, ParamType

BRIGHTNESS_PREFIX = 0xE0
BRIGHTNESS_MASK = 0x1F

Slices = Sequence[MutableSequence["Pixel"]]


@dataclass(frozen=True)
class Pixel:
    """One LED value: 8-bit colour channels plus an encoded brightness byte."""

    red: int = 0
    green: int = 0
    blue: int = 0
    brightness: int = BRIGHTNESS_PREFIX


def make_pixel(red: int, green: int, blue: int, brightness: int) -> Pixel:
    """Build a pixel, encoding the 5-bit brightness with the LED frame prefix."""
    return Pixel(
        red & 0xFF,
        green & 0xFF,
        blue & 0xFF,
        BRIGHTNESS_PREFIX | (brightness & BRIGHTNESS_MASK),
    )


def blank_pixel() -> Pixel:
    """A dark pixel with zero brightness."""
    return Pixel()


@dataclass
class EffectState:
    """State shared across the effect stack for one frame."""

    slice_offset: int = 0


def _wrap_int16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def _dimensions(slices: Slices) -> tuple[int, int]:
    if not slices:
        return 0, 0
    return len(slices), len(slices[0])


def _enum_param(key: str, label: str, default: int, minimum: int, maximum: int,
                options: tuple[ParamOption, ...]) -> Param:
    return Param(
        key=key,
        label=label,
        type=ParamType.ENUM,
        value=default,
        default=default,
        minimum=minimum,
        maximum=maximum,
        options=options,
    )


class Effect(ABC):
    """An effect with named parameters that transforms the back buffer."""

    name: str = ""
    key: str = ""

    def __init__(self) -> None:
        self.params: list[Param] = self._make_params()

    @abstractmethod
    def _make_params(self) -> list[Param]:
        """Create this effect's parameters with their defaults."""

    def find_param(self, key: str) -> Param | None:
        """Return the parameter with ``key``, or None."""
        return next((p for p in self.params if p.key == key), None)

    def reset_defaults(self) -> None:
        """Restore every parameter to its default."""
        for param in self.params:
            param.reset()

    def is_active(self) -> bool:
        """Whether the effect does anything with its current parameters."""
        return True

    @abstractmethod
    def apply(self, state: EffectState, slices: Slices, time_ms: int) -> None:
        """Apply the effect to ``slices`` (the back buffer) at ``time_ms``."""


_ROT_SPEED_OPTIONS = (
    ParamOption("Off", 0), ParamOption("Slow", 15),
    ParamOption("Medium", 45), ParamOption("Fast", 90),
)
_ROT_DIRECTION_OPTIONS = (
    ParamOption("Clockwise", 1), ParamOption("Counterclockwise", -1),
)


class RotationEffect(Effect):
    """Spins the image by shifting the slice offset over time."""

    name = "Rotation"
    key = "rot"

    def _make_params(self) -> list[Param]:
        return [
            _enum_param("speed", "Speed", 0, 0, 90, _ROT_SPEED_OPTIONS),
            _enum_param("direction", "Direction", 1, -1, 1, _ROT_DIRECTION_OPTIONS),
        ]

    def is_active(self) -> bool:
        return self.params[0].value != 0

    def apply(self, state: EffectState, slices: Slices, time_ms: int) -> None:
        deg_per_sec = self.params[0].value * self.params[1].value
        angle = _trunc_div(deg_per_sec * ((time_ms & 0xFFFFFFFF) // 10), 100)
        delta = _wrap_int16(_trunc_mod(angle, 360))
        state.slice_offset = _wrap_int16(state.slice_offset + delta)


_DURATION_OPTIONS = (
    ParamOption("200 ms", 200), ParamOption("500 ms", 500),
    ParamOption("1000 ms", 1000), ParamOption("2000 ms", 2000),
)
_FACTOR_OPTIONS = (
    ParamOption("1.2", 12), ParamOption("1.5", 15),
    ParamOption("2.0", 20), ParamOption("3.0", 30),
)


def _ping_pong(time_ms: int, duration_ms: int) -> tuple[int, int]:
    """Return (ramp, half): ramp rises from 0 to half and back over one cycle."""
    half = duration_ms // 2
    cycle = (time_ms & 0xFFFFFFFF) % duration_ms
    ramp = cycle if cycle <= half else duration_ms - cycle
    return ramp, half


class ScaleEffect(Effect):
    """Pulses the image outward by a uniform radial scale."""

    name = "Scale"
    key = "scale"

    def _make_params(self) -> list[Param]:
        return [
            _enum_param("duration", "Duration", 500, 200, 2000, _DURATION_OPTIONS),
            _enum_param("factor", "Scale factor", 15, 12, 30, _FACTOR_OPTIONS),
        ]

    def apply(self, state: EffectState, slices: Slices, time_ms: int) -> None:
        duration_ms = self.params[0].value
        max_scale_tenths = self.params[1].value
        if duration_ms <= 0 or max_scale_tenths <= 10:
            return
        if duration_ms // 2 <= 0:
            return

        ramp, half = _ping_pong(time_ms, duration_ms)
        amplitude = max_scale_tenths - 10
        scale_tenths = 10 + (amplitude * ramp) // half
        if scale_tenths > 10:
            self._apply_radial_scale(slices, scale_tenths)

    @staticmethod
    def _source_led(led: int, num_leds: int, scale_tenths: int) -> int:
        src_q8 = (((led << 8) + 128) * 10) // scale_tenths - 128
        if src_q8 < 0:
            return 0
        src = (src_q8 + 128) >> 8
        return min(src, num_leds - 1)

    @classmethod
    def _apply_radial_scale(cls, slices: Slices, scale_tenths: int) -> None:
        _, num_leds = _dimensions(slices)
        if num_leds == 0:
            return
        sources = [cls._source_led(led, num_leds, scale_tenths) for led in range(num_leds)]
        for row in slices:
            for led in reversed(range(num_leds)):
                row[led] = row[sources[led]]


class FisheyeScaleEffect(Effect):
    """Magnifies the centre while keeping the outer edge anchored."""

    name = "Fisheye Scale"
    key = "fisheye"

    def _make_params(self) -> list[Param]:
        return [
            _enum_param("duration", "Duration", 500, 200, 2000, _DURATION_OPTIONS),
            _enum_param("factor", "Scale factor", 20, 12, 30, _FACTOR_OPTIONS),
        ]

    def apply(self, state: EffectState, slices: Slices, time_ms: int) -> None:
        duration_ms = self.params[0].value
        max_scale_tenths = self.params[1].value
        if duration_ms <= 0 or max_scale_tenths <= 10:
            return
        if duration_ms // 2 <= 0:
            return

        ramp, half = _ping_pong(time_ms, duration_ms)
        center_shrink_q8 = 256 - (10 * 256 + max_scale_tenths // 2) // max_scale_tenths
        effect_q8 = (center_shrink_q8 * ramp) // half
        if effect_q8 > 0:
            self._apply_fisheye(slices, effect_q8)

    @staticmethod
    def _source_led(led: int, num_leds: int, effect_q8: int) -> int:
        if num_leds <= 1 or effect_q8 <= 0:
            return led
        max_led = num_leds - 1
        r_q8 = min((led * 256 + max_led // 2) // max_led, 256)
        inv_q8 = 256 - r_q8
        inv_sq_q8 = (inv_q8 * inv_q8 + 128) >> 8
        shrink_q8 = (effect_q8 * inv_sq_q8 + 128) >> 8
        ratio_q8 = max(256 - shrink_q8, 0)
        src = (led * ratio_q8 + 128) >> 8
        return src if src < num_leds else max_led

    @classmethod
    def _apply_fisheye(cls, slices: Slices, effect_q8: int) -> None:
        _, num_leds = _dimensions(slices)
        if num_leds == 0:
            return
        for led in reversed(range(num_leds)):
            src = cls._source_led(led, num_leds, effect_q8)
            for row in slices:
                row[led] = row[src]


_BLOOM_RADIUS_OPTIONS = (
    ParamOption("1 LED", 1), ParamOption("2 LEDs", 2),
    ParamOption("3 LEDs", 3), ParamOption("4 LEDs", 4),
)
_BLOOM_INTENSITY_OPTIONS = (
    ParamOption("25%", 64), ParamOption("50%", 128),
    ParamOption("75%", 192), ParamOption("100%", 255),
)
_BLOOM_THRESHOLD_OPTIONS = (
    ParamOption("Off", 0), ParamOption("Low", 64),
    ParamOption("Medium", 128), ParamOption("High", 192),
)


class BloomEffect(Effect):
    """Spreads light from bright LEDs onto their radial neighbours."""

    name = "Bloom"
    key = "bloom"

    def _make_params(self) -> list[Param]:
        return [
            _enum_param("radius", "Radius", 2, 1, 4, _BLOOM_RADIUS_OPTIONS),
            _enum_param("intensity", "Intensity", 128, 64, 255, _BLOOM_INTENSITY_OPTIONS),
            _enum_param("threshold", "Threshold", 128, 0, 192, _BLOOM_THRESHOLD_OPTIONS),
        ]

    def apply(self, state: EffectState, slices: Slices, time_ms: int) -> None:
        radius = self.params[0].value
        intensity_q8 = self.params[1].value
        threshold = self.params[2].value
        if radius <= 0 or intensity_q8 <= 0:
            return
        _, num_leds = _dimensions(slices)
        if num_leds == 0:
            return

        for row in slices:
            scratch = list(row)
            for led in range(num_leds):
                lo = max(led - radius, 0)
                hi = min(led + radius, num_leds - 1)
                sum_r = sum_g = sum_b = total_weight = 0
                for n in range(lo, hi + 1):
                    if n == led:
                        continue
                    p = scratch[n]
                    if p.red < threshold and p.green < threshold and p.blue < threshold:
                        continue
                    weight = radius + 1 - abs(led - n)
                    sum_r += p.red * weight
                    sum_g += p.green * weight
                    sum_b += p.blue * weight
                    total_weight += weight

                if total_weight <= 0:
                    continue

                add_r = ((sum_r // total_weight) * intensity_q8 + 128) >> 8
                add_g = ((sum_g // total_weight) * intensity_q8 + 128) >> 8
                add_b = ((sum_b // total_weight) * intensity_q8 + 128) >> 8

                current = row[led]
                updated = replace(
                    current,
                    red=min(current.red + add_r, 255),
                    green=min(current.green + add_g, 255),
                    blue=min(current.blue + add_b, 255),
                )
                if add_r | add_g | add_b:
                    source_br = max(
                        (scratch[i].brightness & BRIGHTNESS_MASK
                         for i in range(lo, hi + 1) if i != led),
                        default=0,
                    )
                    if source_br > (updated.brightness & BRIGHTNESS_MASK):
                        updated = replace(updated, brightness=BRIGHTNESS_PREFIX | source_br)
                row[led] = updated