import pytest

from povdisplay.param import Param, ParamOption, ParamType


def make_enum():
    return Param(
        key="speed",
        label="Speed",
        type=ParamType.ENUM,
        value=0,
        default=0,
        minimum=0,
        maximum=90,
        options=(
            ParamOption("Off", 0),
            ParamOption("Slow", 15),
            ParamOption("Medium", 45),
            ParamOption("Fast", 90),
        ),
    )


def make_text(size=8):
    return Param(key="text", label="Text", type=ParamType.TEXT, text_size=size)


@pytest.mark.parametrize("given", [-100, 0, 5, 48, 1000])
def test_int_stays_within_bounds(given):
    p = Param(key="speed", label="Speed", type=ParamType.INT, minimum=1, maximum=48)
    p.set_int(given)
    assert 1 <= p.value <= 48
    if 1 <= given <= 48:
        assert p.value == given


def test_int_clamps_to_edges():
    p = Param(key="speed", label="Speed", type=ParamType.INT, minimum=1, maximum=48)
    p.set_int(99)
    assert p.value == 48
    p.set_int(-5)
    assert p.value == 1


def test_bool_normalises():
    p = Param(key="mirror", label="Mirror", type=ParamType.BOOL)
    p.set_int(42)
    assert p.value == 1
    p.set_int(0)
    assert p.value == 0


def test_color_masks_to_24_bits():
    p = Param(key="color", label="Color", type=ParamType.COLOR)
    p.set_int(0x7F123456)
    assert p.value == 0x123456
    p.set_int(0xFF8000)
    assert p.value == 0xFF8000


def test_enum_accepts_only_options():
    p = make_enum()
    assert p.allows(45)
    assert not p.allows(44)
    p.set_int(45)
    assert p.value == 45
    p.set_int(44)
    assert p.value == 45


def test_text_type_ignores_set_int():
    p = make_text()
    p.set_int(7)
    assert p.value == 0


def test_set_text_stores_short_string():
    p = make_text()
    p.set_text("HELLO")
    assert p.text == "HELLO"


def test_set_text_truncates_long_string():
    p = make_text(size=64)
    p.set_text("A" * 127)
    assert len(p.text.encode("utf-8")) < p.text_size
    assert p.text == "A" * (p.text_size - 1)


def test_set_text_ignored_on_non_text_param():
    p = make_enum()
    p.set_text("HELLO")
    assert p.text == ""


def test_set_text_ignored_without_buffer():
    p = make_text(size=0)
    p.set_text("HELLO")
    assert p.text == ""


def test_reset_restores_default():
    p = make_enum()
    p.set_int(90)
    assert p.value == 90
    p.reset()
    assert p.value == p.default


def test_reset_restores_default_text():
    p = Param(key="text", label="Text", type=ParamType.TEXT, text_size=16, default_text="HI")
    p.set_text("WORLD")
    p.reset()
    assert p.text == "HI"