import pytest

from slidetree.errors import DocumentError
from slidetree.slide_models import (
    Group,
    PageElement,
    PlaceholderType,
    Presentation,
    Shape,
    Table,
)
from slidetree.text_models import TextList, Unit

from tests.presentation_fixtures import sample_presentation, sample_snapshot, text_shape


def test_snapshot_round_trip_keeps_payload():
    snapshot = sample_snapshot()
    presentation = Presentation.from_dict(snapshot)

    assert presentation.to_dict() == Presentation.from_dict(presentation.to_dict()).to_dict()
    assert presentation.to_dict()["slides"][0]["objectId"] == "slide_1"
    assert presentation.title == "Quarterly Review"
    assert presentation.page_size.width.unit is Unit.EMU


def test_to_dict_omits_absent_fields_but_keeps_page_lists():
    payload = Presentation().to_dict()

    assert payload == {"slides": [], "masters": [], "layouts": []}


def test_element_kinds_are_parsed_into_variants():
    presentation = sample_presentation()

    title = presentation.slides[0].page_elements[1]
    assert isinstance(title.kind, Shape)
    assert title.kind_key == "shape"
    assert title.placeholder.type is PlaceholderType.TITLE
    assert title.placeholder.parent_object_id == "layout_1_title"

    table = presentation.slides[1].page_elements[0]
    assert isinstance(table.kind, Table)
    assert table.kind.table_rows[0].table_cells[1].column_index == 1


def test_page_element_without_kind_is_rejected():
    with pytest.raises(DocumentError, match="exactly one element kind"):
        PageElement.from_dict({"objectId": "e1"})


def test_page_element_with_two_kinds_is_rejected():
    with pytest.raises(DocumentError) as excinfo:
        PageElement.from_dict({"objectId": "e1", "shape": {}, "image": {}})

    assert "shape, image" in str(excinfo.value)
    assert excinfo.value.context == "PageElement e1"


def test_page_element_requires_object_id():
    with pytest.raises(DocumentError, match="missing objectId"):
        PageElement.from_dict({"shape": {}})


def test_unknown_enum_value_is_reported_with_field_name():
    data = text_shape("e1", placeholder={"type": "NOT_A_TYPE"})

    with pytest.raises(DocumentError) as excinfo:
        PageElement.from_dict(data)

    assert excinfo.value.context == "Placeholder.type"


def test_group_children_are_walked_depth_first():
    group = PageElement.from_dict(
        {
            "objectId": "g1",
            "elementGroup": {
                "children": [
                    text_shape("a"),
                    {"objectId": "g2", "elementGroup": {"children": [text_shape("b")]}},
                ]
            },
        }
    )

    assert isinstance(group.kind, Group)
    assert [element.object_id for element in group.iter_tree()] == ["g1", "a", "g2", "b"]


def test_nesting_level_keys_are_strings_in_json():
    text_list = TextList.from_dict(
        {"listId": "l1", "nestingLevel": {"0": {"bulletStyle": {"bold": True}}}}
    )

    assert 0 in text_list.nesting_level
    assert text_list.to_dict()["nestingLevel"] == {"0": {"bulletStyle": {"bold": True}}}


def test_iter_pages_covers_slides_layouts_and_masters():
    presentation = sample_presentation()

    assert [page.object_id for page in presentation.iter_pages()] == [
        "slide_1",
        "slide_2",
        "layout_1",
        "master_1",
    ]


def test_non_object_snapshot_is_rejected():
    with pytest.raises(DocumentError, match="expected a JSON object"):
        Presentation.from_dict(["not", "a", "deck"])
