# povdisplay

Building blocks for drawing pictures on a persistence-of-vision (POV) LED
display. A POV display is a spinning arm of LEDs that draws an image one
angular slice at a time.

The package is pure Python and has no runtime dependencies.

## What is inside

- `povdisplay.param`: typed, self-validating settings.
  - `Param` holds `key`, `label`, `type`, `value`, `default`, `minimum`,
    `maximum`, `options` and, for text parameters, `text` and `text_size`.
  - `Param.set_int` clamps `INT` values to `[minimum, maximum]`, stores `BOOL`
    values as 0 or 1 and masks `COLOR` values to 24 bits (0xRRGGBB). It accepts
    an `ENUM` value only when the value matches one of the `ParamOption`s.
  - `Param.set_text` stores a string cut to at most `text_size - 1` UTF-8
    bytes. For parameters that are not text it does nothing.
  - `Param.allows` checks a value against the enum options.
  - `Param.reset` restores the default value.
  - `ParamType` lists the kinds of value: `INT`, `BOOL`, `COLOR`, `TEXT` and
    `ENUM`.
- `povdisplay.output_scale`: `compute_output_scale(max_leds, num_leds, radial_balance)`
  returns a pair `(scales, active)`.
  - `scales` is a list of `max_leds` values from 0 to 255.
  - With radial balance on, inner LEDs are dimmed in proportion to their
    radius. No LED goes below 1/`MAX_RADIAL_BOOST` of full brightness.
  - `active` tells you whether any entry is below 255.
- `povdisplay.timing`: `TimingSource`, an abstract interface for rotation
  timing, with `consume_new_rotation`, `rotation_period_us` and
  `last_trigger_ms`. `HallTimingSource` passes these calls on to any
  Hall-sensor object that provides the same three methods.
- `povdisplay.font`: a 5×7 bitmap font covering ASCII 32–126, Cyrillic
  U+0410–U+044F, Ё and ё. Some Cyrillic letters have wider 6- or 7-column
  forms (Ж, Ц, Ч, Ш, Щ, Ы).
  - `glyph_for(codepoint)` returns a `Glyph`, or `None` when the font has no
    glyph for that codepoint.
  - `next_codepoint(data, offset)` decodes one UTF-8 codepoint and returns
    `(codepoint, new_offset)`. Malformed input gives `'?'`.
  - `decode_run(data)` turns text or bytes into a `Run` of up to 64
    `RunGlyph`s, together with its total pixel width. Glyphs are separated by a
    one-column gap.
  - `measure_glyphs` computes the same width for any sequence of run glyphs.
- `povdisplay.effects`: effects that work in place on a list of slices, where
  each slice is a mutable list of `Pixel`s.
  - A `Pixel` has `red`, `green` and `blue` channels and a brightness byte.
    `make_pixel` builds the brightness byte as `0xE0 | (brightness & 0x1F)`.
    `blank_pixel()` returns a dark pixel.
  - `RotationEffect` advances `EffectState.slice_offset` over time. Its speed
    options are Off, Slow, Medium and Fast, and its direction is clockwise or
    counterclockwise.
  - `ScaleEffect` zooms the picture out along the radius and back, over a
    cycle of `duration` milliseconds, up to `factor`/10.
  - `FisheyeScaleEffect` magnifies the centre while the outer LED stays in
    place.
  - `BloomEffect` adds a weighted glow from bright neighbours within `radius`
    LEDs. Pixels below `threshold` give no glow, and the glow is scaled by
    `intensity`.
  - Every effect exposes `params`, `find_param`, `reset_defaults` and
    `is_active`.

## Install

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Examples

Decode some text and measure it:

```python
from povdisplay.font import decode_run

run = decode_run("ЖЫ".encode("utf-8"))
print(run.count, run.width)   # 2 14
```

Compute the radial balance table for a 26-LED arm:

```python
from povdisplay.output_scale import compute_output_scale

scale, active = compute_output_scale(64, 26, True)
print(active, scale[25])   # True 255
```

Apply a bloom to one slice of pixels:

```python
from povdisplay.effects import BloomEffect, EffectState, make_pixel, blank_pixel

slice_ = [blank_pixel() for _ in range(10)]
slice_[5] = make_pixel(200, 0, 0, 31)

bloom = BloomEffect()
bloom.find_param("threshold").set_int(0)
bloom.apply(EffectState(), [slice_], 0)
```

Rotation changes the state, not the pixels:

```python
from povdisplay.effects import RotationEffect, EffectState

rot = RotationEffect()
rot.find_param("speed").set_int(90)
state = EffectState()
rot.apply(state, [], 1000)
print(state.slice_offset)   # 90
```

## What this package does not do

The package provides parts for a display, not a complete one. It does not
include any of the following:

- a framebuffer class; effects work on plain lists of pixel slices that you
  provide
- a slice scheduler or an LED driver
- image or text patterns that render frames
- an effect stack or registry
- persistent settings storage
- a web or command-line control interface

## Running the tests

```
pytest
```