import pytest

from slidetree.config import Settings
from slidetree.errors import RenderError
from slidetree.slide_models import Presentation
from slidetree.svg_renderer import SlideSvgRenderer, convert_presentation_to_svg

from tests.presentation_fixtures import sample_presentation, sample_snapshot, text_shape


def test_one_svg_per_slide_with_page_size_in_points():
    svgs = convert_presentation_to_svg(sample_presentation())

    assert len(svgs) == 2
    assert svgs[0].startswith('<svg xmlns="http://www.w3.org/2000/svg" width="720pt" height="405pt"')
    assert svgs[0].endswith("</svg>")


def test_background_comes_from_theme():
    svg = convert_presentation_to_svg(sample_presentation())[0]

    assert '<rect width="100%" height="100%" fill="#efefef"/>' in svg


def test_slide_background_fill_wins_over_theme():
    snapshot = sample_snapshot()
    snapshot["slides"][0]["pageProperties"] = {
        "pageBackgroundFill": {
            "solidFill": {"color": {"rgbColor": {"red": 0, "green": 0, "blue": 1}}}
        }
    }

    svg = convert_presentation_to_svg(Presentation.from_dict(snapshot))[0]

    assert 'fill="#0000ff"/>' in svg


def test_inherited_placeholder_styles_reach_the_markup():
    svg = convert_presentation_to_svg(sample_presentation())[0]

    assert 'data-object-id="slide_1_title"' in svg
    assert "font-family:&#x27;Georgia&#x27;" in svg or "font-family:'Georgia'" in svg
    assert "font-size:12pt" in svg
    assert "font-weight:bold" in svg
    assert "color:#ff0000" in svg
    assert ">Results<br/></span>" in svg


def test_transform_is_converted_to_points():
    svg = convert_presentation_to_svg(sample_presentation())[0]

    assert 'transform="matrix(1 0 0 1 1 144)"' in svg


def test_table_cells_are_rendered():
    svg = convert_presentation_to_svg(sample_presentation())[1]

    assert "<table" in svg
    assert svg.count("<td") == 2
    assert "EMEA" in svg
    assert "height:30pt;" in svg


def test_unsupported_kinds_render_a_labelled_box():
    snapshot = sample_snapshot()
    snapshot["slides"][1]["pageElements"] = [
        {"objectId": "chart", "sheetsChart": {"spreadsheetId": "x", "chartId": 1}}
    ]

    svg = convert_presentation_to_svg(Presentation.from_dict(snapshot))[1]

    assert "SheetsChart Placeholder" in svg


def test_unknown_shape_type_is_an_outline():
    snapshot = sample_snapshot()
    snapshot["slides"][1]["pageElements"] = [text_shape("star", shape_type="STAR_5")]

    svg = convert_presentation_to_svg(Presentation.from_dict(snapshot))[1]

    assert "<title>STAR_5</title>" in svg


def test_text_is_escaped():
    snapshot = sample_snapshot()
    run = snapshot["slides"][0]["pageElements"][0]["shape"]["text"]["textElements"][1]["textRun"]
    run["content"] = "R&D <growth>\n"

    svg = convert_presentation_to_svg(Presentation.from_dict(snapshot))[0]

    assert "R&amp;D &lt;growth&gt;" in svg


def test_missing_page_size_is_an_error():
    snapshot = sample_snapshot()
    del snapshot["pageSize"]

    with pytest.raises(RenderError, match="page size"):
        SlideSvgRenderer(Presentation.from_dict(snapshot)).render_all()


def test_settings_provide_defaults():
    snapshot = sample_snapshot()
    del snapshot["masters"][0]["pageProperties"]

    settings = Settings(default_background_color="#fafafa", default_font_family="Inter")
    svg = convert_presentation_to_svg(Presentation.from_dict(snapshot), settings)[0]

    assert 'fill="#fafafa"/>' in svg
    assert "font-family:'Inter'" in svg or "font-family:&#x27;Inter&#x27;" in svg
