import json

from sceneobjects.colors import COLOR_DICTIONARY
from sceneobjects.objects import ObjectData, ObjectsManager
from sceneobjects.views import ObjectList, ObjectRow, SceneObject


def make_data(active=True, color="red"):
    return ObjectData(3, "Cylinder", (1.0, 2.0, 3.0), COLOR_DICTIONARY[color], active)


def test_row_shows_data():
    row = ObjectRow(make_data())
    assert row.name_text == "Cylinder"
    assert row.color_text == "red"
    assert row.active_checked is True


def test_row_checkbox_toggles_data():
    data = make_data()
    row = ObjectRow(data)
    row.on_checkbox_changed(False)
    assert data.is_active is False
    assert row.active_checked is False


def test_row_follows_colour_change():
    data = make_data()
    row = ObjectRow(data)
    data.set_color(COLOR_DICTIONARY["purple"])
    assert row.color_text == "purple"


def test_list_builds_rows_and_saves(tmp_path):
    manager = ObjectsManager(content_dir=tmp_path, saved_dir=tmp_path / "saved")
    manager.objects.extend([make_data(), make_data(active=False, color="cyan")])
    listing = ObjectList(manager)
    assert [r.data for r in listing.rows] == manager.objects
    path = listing.finish()
    saved = json.loads(path.read_text())["objects"]
    assert [e["color"] for e in saved] == ["red", "cyan"]
    assert [e["isActive"] for e in saved] == [True, False]


def test_scene_object_initial_state():
    data = make_data(active=False)
    scene = SceneObject(data)
    assert scene.location == data.position
    assert scene.mesh_name == "Cylinder"
    assert scene.visible is False
    assert scene.material_color == (1.0, 0.0, 0.0, 1.0)


def test_scene_object_follows_data():
    data = make_data()
    scene = SceneObject(data)
    data.set_color(COLOR_DICTIONARY["white"])
    data.toggle_active()
    assert scene.material_color == COLOR_DICTIONARY["white"].as_linear()
    assert scene.visible is False