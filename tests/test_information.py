import pytest

from camweb.information import (
    ObjectConfigurator,
    ObjectInformation,
    ObjectInformationMap,
    UnknownPropertyError,
)

VERSION_INFO = {"product": "cam2web", "version": "1.1.0", "platform": "Linux"}


def test_get_known_property():
    info = ObjectInformationMap(VERSION_INFO)
    assert info.get_property("version") == "1.1.0"
    assert info.get_property("product") == "cam2web"


def test_unknown_property_raises():
    info = ObjectInformationMap(VERSION_INFO)
    with pytest.raises(UnknownPropertyError) as excinfo:
        info.get_property("missing")
    assert excinfo.value.name == "missing"


def test_unknown_property_is_key_error():
    info = ObjectInformationMap({})
    with pytest.raises(KeyError):
        info.get_property("anything")


def test_get_all_properties_matches_input():
    info = ObjectInformationMap(VERSION_INFO)
    assert info.get_all_properties() == VERSION_INFO


def test_get_all_properties_sorted_by_name():
    info = ObjectInformationMap(VERSION_INFO)
    assert list(info.get_all_properties()) == sorted(VERSION_INFO)


def test_map_is_copied_on_construction():
    source = {"title": "Camera"}
    info = ObjectInformationMap(source)
    source["title"] = "Changed"
    assert info.get_property("title") == "Camera"


def test_returned_properties_do_not_change_object():
    info = ObjectInformationMap({"width": "640"})
    props = info.get_all_properties()
    props["width"] = "1"
    assert info.get_property("width") == "640"


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ObjectInformation()
    with pytest.raises(TypeError):
        ObjectConfigurator()


def test_configurator_is_information():
    assert issubclass(ObjectConfigurator, ObjectInformation)
    assert not issubclass(ObjectInformationMap, ObjectConfigurator)
    info = ObjectInformationMap({"device": "Camera"})
    assert isinstance(info, ObjectInformation)
    assert info.get_property("device") == "Camera"
    assert info.get_all_properties() == {"device": "Camera"}