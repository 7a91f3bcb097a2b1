from datetime import datetime, timezone

from liquidglass.core.parameters import GlassParameters
from liquidglass.core.presets import Preset, preset_id_for_name


def test_id_is_derived_from_name():
    assert preset_id_for_name("Deep Ocean Blue") == "deep-ocean-blue"
    assert Preset(name="Frosted").id == "frosted"


def test_equality_and_hash_follow_id():
    a = Preset(name="My Glass", parameters=GlassParameters())
    b = Preset(name="my glass", parameters=GlassParameters().replace(blur_radius=40.0))
    c = Preset(name="Other", parameters=GlassParameters())

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_description_is_derived_from_parameters():
    base = GlassParameters()
    assert Preset(name="d", parameters=base).description == "Medium blur • Specular"

    heavy = base.replace(blur_radius=40.0, tint_opacity=0.5, show_specular_highlight=False)
    assert Preset(name="h", parameters=heavy).description == "Heavy blur • Strong tint"

    light = base.replace(blur_radius=15.0)
    assert Preset(name="l", parameters=light).description == "Light blur • Specular"


def test_created_at_defaults_to_aware_utc_now():
    before = datetime.now(timezone.utc)
    preset = Preset(name="now")
    after = datetime.now(timezone.utc)

    assert preset.created_at.tzinfo is not None
    assert before <= preset.created_at <= after
