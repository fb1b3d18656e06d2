from slidetree.style_merge import (
    fold_text_styles,
    merge_paragraph_styles,
    merge_text_styles,
)
from slidetree.text_models import (
    Alignment,
    Dimension,
    OpaqueColor,
    OptionalColor,
    ParagraphStyle,
    RgbColor,
    TextStyle,
    ThemeColorType,
    Unit,
)


def _red() -> OptionalColor:
    return OptionalColor(opaque_color=OpaqueColor(rgb_color=RgbColor(1.0, 0.0, 0.0)))


def test_specific_fields_override_inherited_ones():
    inherited = TextStyle(font_family="Georgia", bold=False, font_size=Dimension(24, Unit.PT))
    specific = TextStyle(bold=True)

    merged = merge_text_styles(specific, inherited)

    assert merged.bold is True
    assert merged.font_family == "Georgia"
    assert merged.font_size == Dimension(24, Unit.PT)


def test_colours_are_replaced_as_a_whole():
    inherited = TextStyle(foreground_color=_red())
    specific = TextStyle(
        foreground_color=OptionalColor(
            opaque_color=OpaqueColor(theme_color=ThemeColorType.ACCENT1)
        )
    )

    merged = merge_text_styles(specific, inherited)

    assert merged.foreground_color.opaque_color.rgb_color is None
    assert merged.foreground_color.opaque_color.theme_color is ThemeColorType.ACCENT1


def test_merge_does_not_alias_or_mutate_inputs():
    inherited = TextStyle(foreground_color=_red())

    merged = merge_text_styles(None, inherited)
    merged.foreground_color.opaque_color.rgb_color.red = 0.5

    assert inherited.foreground_color.opaque_color.rgb_color.red == 1.0


def test_missing_styles_yield_empty_style():
    assert merge_text_styles(None, None) == TextStyle()
    assert merge_paragraph_styles(None, None) == ParagraphStyle()


def test_paragraph_merge_keeps_unset_fields():
    inherited = ParagraphStyle(alignment=Alignment.CENTER, line_spacing=115.0)
    merged = merge_paragraph_styles(ParagraphStyle(line_spacing=100.0), inherited)

    assert merged.alignment is Alignment.CENTER
    assert merged.line_spacing == 100.0


def test_fold_applies_most_general_first():
    master = TextStyle(font_size=Dimension(24, Unit.PT), bold=False)
    layout = TextStyle(bold=True)
    slide = TextStyle(font_size=Dimension(12, Unit.PT))

    folded = fold_text_styles([master, layout, None, slide])

    assert folded.font_size == Dimension(12, Unit.PT)
    assert folded.bold is True


def test_merge_is_associative():
    a = TextStyle(bold=True)
    b = TextStyle(italic=True, font_family="Inter")
    c = TextStyle(bold=False, font_family="Georgia", font_size=Dimension(10, Unit.PT))

    left = merge_text_styles(a, merge_text_styles(b, c))
    right = merge_text_styles(merge_text_styles(a, b), c)

    assert left == right == TextStyle(
        bold=True, italic=True, font_family="Inter", font_size=Dimension(10, Unit.PT)
    )
