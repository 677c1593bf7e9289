import numpy as np
import pytest

from phylowriter.elements.columns import AttributeColumn
from phylowriter.properties import PropertyDescriptor, property_name, resolve_property
from phylowriter.tracker import EmissionTracker


@pytest.mark.parametrize(
    "column_name, expected",
    [
        ("property.custom_trait", "custom_trait"),
        ("phylogeny.property.habitat", "habitat"),
        ("habitat", "habitat"),
        ("my.property.size", "size"),
        ("property.", ""),
    ],
)
def test_property_name_strips_through_first_prefix(column_name, expected):
    assert property_name(column_name) == expected


def test_defaults_for_missing_metadata():
    column = AttributeColumn("property.custom_trait", [42])
    descriptor = resolve_property(column, 0, EmissionTracker())
    assert descriptor == PropertyDescriptor(
        ref="VTK:custom_trait",
        applies_to="clade",
        datatype="xsd:integer",
        value="42",
        unit=None,
    )


def test_metadata_overrides_defaults():
    column = AttributeColumn(
        "length",
        np.array([3.5, 4.25]),
        metadata={"authority": "NCBI", "applies_to": "node", "unit": "mm"},
    )
    descriptor = resolve_property(column, 1, EmissionTracker())
    assert descriptor.ref == "NCBI:length"
    assert descriptor.applies_to == "node"
    assert descriptor.unit == "mm"
    assert descriptor.datatype == "xsd:double"
    assert descriptor.value == "4.25"


def test_empty_metadata_falls_back_to_defaults():
    column = AttributeColumn(
        "habitat", ["sea"], metadata={"authority": "", "applies_to": "", "unit": ""}
    )
    descriptor = resolve_property(column, 0, EmissionTracker())
    assert descriptor.ref == "VTK:habitat"
    assert descriptor.applies_to == "clade"
    assert descriptor.unit is None


def test_node_level_resolution_does_not_mark():
    tracker = EmissionTracker()
    column = AttributeColumn("habitat", ["sea", "land"])
    resolve_property(column, 1, tracker)
    assert "habitat" not in tracker


def test_tree_level_resolution_reads_first_value_and_marks():
    tracker = EmissionTracker()
    column = AttributeColumn("phylogeny.property.age", [12, 99])
    descriptor = resolve_property(column, None, tracker)
    assert descriptor.value == "12"
    assert descriptor.ref == "VTK:age"
    assert "phylogeny.property.age" in tracker


def test_tree_level_resolution_marks_even_without_value():
    tracker = EmissionTracker()
    column = AttributeColumn("phylogeny.property.age", [None, 3])
    assert resolve_property(column, None, tracker) is None
    assert "phylogeny.property.age" in tracker


def test_missing_value_is_not_a_property():
    column = AttributeColumn("LWR", [None, 0.18])
    assert resolve_property(column, 0, EmissionTracker()) is None
    assert resolve_property(column, 1, EmissionTracker()).value == "0.18"


def test_descriptor_element_attribute_order():
    descriptor = PropertyDescriptor(
        ref="VTK:size", applies_to="clade", datatype="xsd:double", value="1.0", unit="cm"
    )
    element = descriptor.to_element()
    assert element.tag == "property"
    assert list(element.attrib) == ["datatype", "ref", "applies_to", "unit"]
    assert element.text == "1.0"


def test_descriptor_element_omits_missing_unit():
    descriptor = PropertyDescriptor(
        ref="VTK:size", applies_to="clade", datatype="xsd:string", value="x"
    )
    assert "unit" not in descriptor.to_element().attrib


def test_float32_property_text():
    column = AttributeColumn("size", np.array([0.1, 2.3], dtype=np.float32))
    descriptor = resolve_property(column, 1, EmissionTracker())
    assert descriptor.datatype == "xsd:float"
    assert descriptor.value == "2.3"
