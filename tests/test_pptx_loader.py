import io

import pytest

pytest.importorskip("pptx")
from pptx import Presentation as PptxPresentation
from pptx.dml.color import RGBColor
from pptx.enum.shapes import MSO_SHAPE
from pptx.util import Inches, Pt

from slidetree.errors import DocumentError
from slidetree.markdown_extractor import extract_text_from_presentation
from slidetree.placeholders import build_index, find_ancestor_placeholder
from slidetree.pptx_loader import load_pptx
from slidetree.slide_models import Group, PageType, PlaceholderType, Shape, Table
from slidetree.svg_renderer import convert_presentation_to_svg
from slidetree.text_models import ThemeColorType, Unit


def _build_deck() -> io.BytesIO:
    prs = PptxPresentation()
    prs.core_properties.title = "Loader deck"

    slide = prs.slides.add_slide(prs.slide_layouts[1])
    slide.shapes.title.text = "Agenda"
    slide.placeholders[1].text = "First point"

    box = slide.shapes.add_shape(MSO_SHAPE.RECTANGLE, Inches(1), Inches(5), Inches(2), Inches(1))
    box.fill.solid()
    box.fill.fore_color.rgb = RGBColor(0x12, 0x34, 0x56)
    run = box.text_frame.paragraphs[0].add_run()
    run.text = "Boxed"
    run.font.bold = True
    run.font.size = Pt(18)

    table_slide = prs.slides.add_slide(prs.slide_layouts[5])
    table = table_slide.shapes.add_table(2, 2, Inches(1), Inches(2), Inches(4), Inches(1)).table
    table.cell(0, 0).text = "Region"
    table.cell(0, 1).text = "Sales"

    group = table_slide.shapes.add_group_shape()
    grouped = group.shapes.add_textbox(Inches(6), Inches(4), Inches(2), Inches(1))
    grouped.text_frame.text = "Grouped"

    stream = io.BytesIO()
    prs.save(stream)
    stream.seek(0)
    return stream


@pytest.fixture(scope="module")
def presentation():
    return load_pptx(_build_deck())


def test_pages_are_numbered_by_kind(presentation):
    assert [slide.object_id for slide in presentation.slides] == ["slide_1", "slide_2"]
    assert presentation.masters[0].object_id == "master_1"
    assert presentation.masters[0].page_type is PageType.MASTER
    assert presentation.layouts[0].object_id == "layout_1"
    assert presentation.title == "Loader deck"
    assert presentation.page_size.width.unit is Unit.EMU


def test_slide_points_to_its_layout(presentation):
    properties = presentation.slides[0].slide_properties

    assert properties.layout_object_id == "layout_2"
    assert properties.master_object_id == "master_1"


def test_slide_placeholders_chain_to_layout_and_master(presentation):
    index = build_index(presentation)
    title = next(
        element
        for element in presentation.slides[0].page_elements
        if element.placeholder is not None
        and element.placeholder.type is PlaceholderType.TITLE
    )

    layout_title = find_ancestor_placeholder(title.placeholder, "layout_2", index)
    assert layout_title is not None
    assert layout_title.object_id.startswith("layout_2_e")

    master_title = find_ancestor_placeholder(layout_title.placeholder, "layout_2", index)
    assert master_title is not None
    assert master_title.object_id.startswith("master_1_e")


def test_paragraph_text_ends_with_newline(presentation):
    title = presentation.slides[0].page_elements[0]

    assert isinstance(title.kind, Shape)
    assert title.kind.text.plain_text() == "Agenda\n"


def test_run_styles_and_fills_are_imported(presentation):
    box = next(
        element
        for element in presentation.slides[0].page_elements
        if isinstance(element.kind, Shape) and element.kind.shape_type == "RECTANGLE"
    )

    style = next(box.kind.text.iter_runs()).style
    assert style.bold is True
    assert style.font_size.magnitude == 18
    fill = box.kind.shape_properties.shape_background_fill.solid_fill
    assert round(fill.color.rgb_color.red * 255) == 0x12


def test_tables_are_imported(presentation):
    table = next(
        element.kind
        for element in presentation.slides[1].page_elements
        if isinstance(element.kind, Table)
    )

    assert table.rows == 2
    assert table.columns == 2
    assert table.table_rows[0].table_cells[1].text.plain_text() == "Sales\n"


def test_group_children_keep_their_slide_offsets(presentation):
    group = next(
        element
        for element in presentation.slides[1].page_elements
        if isinstance(element.kind, Group)
    )

    (child,) = group.kind.children
    assert child.kind.text.plain_text() == "Grouped\n"
    assert child.transform.translate_x == Inches(6)
    assert child.transform.translate_y == Inches(4)
    assert child.placeholder is None

def test_master_theme_colours_are_read(presentation):
    scheme = presentation.masters[0].color_scheme

    assert scheme is not None
    assert scheme.lookup(ThemeColorType.ACCENT1) is not None
    assert scheme.lookup(ThemeColorType.TEXT1) == scheme.lookup(ThemeColorType.DARK1)


def test_loaded_deck_feeds_markdown_and_svg(presentation):
    markdown = extract_text_from_presentation(presentation)
    svgs = convert_presentation_to_svg(presentation)

    assert "Agenda" in markdown
    assert "Region Sales" in markdown
    assert len(svgs) == 2
    assert "Boxed" in svgs[0]


def test_non_pptx_input_is_a_document_error():
    with pytest.raises(DocumentError):
        load_pptx(io.BytesIO(b"not a zip archive"))
