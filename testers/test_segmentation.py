# -*- coding: utf-8 -*-
from wavemesh.assets.material import Material
from wavemesh.loader.segmentation import MeshSegmenter
from wavemesh.scene.mesh import Face


def tri(a=0):
    return Face([a, a + 1, a + 2])


def test_initial_state_is_lazy():
    seg = MeshSegmenter()
    assert seg.current_name == ""
    assert seg.meshes == {}
    assert seg.smooth_shading is False

    seg.push_faces([tri()])
    assert list(seg.meshes) == [""]
    assert seg.meshes[""].face_count == 1


def test_reopening_a_group_appends_in_order():
    seg = MeshSegmenter()
    seg.open_group("A")
    seg.push_faces([tri(0)])
    seg.open_group("B")
    seg.push_faces([tri(10)])
    seg.open_group("A")
    seg.push_faces([tri(20)])

    assert list(seg.meshes) == ["A", "B"]
    assert [f.position_indices[0] for f in seg.meshes["A"].faces] == [0, 20]
    assert seg.meshes["B"].face_count == 1


def test_group_name_is_trimmed():
    seg = MeshSegmenter()
    seg.open_group("  wheel front ")
    assert seg.current_name == "wheel front"


def test_toggle_on_empty_mesh_creates_nothing():
    seg = MeshSegmenter()
    assert seg.set_smooth_shading(True) is None
    assert seg.smooth_shading is True
    assert seg.meshes == {}


def test_toggle_without_flip_is_ignored():
    seg = MeshSegmenter()
    seg.push_faces([tri()])
    assert seg.set_smooth_shading(False) is None
    assert seg.current_name == ""


def test_flip_after_faces_creates_anonymous_group():
    seg = MeshSegmenter()
    seg.open_group("body")
    seg.push_faces([tri()])

    created = seg.set_smooth_shading(True)
    assert created is not None
    assert created.name == "group0"
    assert seg.current_name == "group0"

    # второй переключатель подряд – новая группа ещё пуста
    assert seg.set_smooth_shading(False) is None
    assert list(seg.meshes) == ["body", "group0"]

    seg.push_faces([tri(3)])
    assert seg.set_smooth_shading(True).name == "group1"


def test_anonymous_names_skip_existing_groups():
    seg = MeshSegmenter()
    seg.open_group("group0")
    seg.push_faces([tri()])
    assert seg.set_smooth_shading(True).name == "group1"


def test_counters_are_per_instance():
    names = []
    for _ in range(2):
        seg = MeshSegmenter()
        seg.push_faces([tri()])
        names.append(seg.set_smooth_shading(True).name)
    assert names == ["group0", "group0"]


def test_bind_material_targets_current_mesh():
    seg = MeshSegmenter()
    red = Material("red")
    seg.bind_material(red)
    seg.open_group("other")
    seg.bind_material(red)
    assert seg.meshes[""].material is red
    assert seg.meshes["other"].material is seg.meshes[""].material


def test_reset():
    seg = MeshSegmenter()
    seg.push_faces([tri()])
    seg.set_smooth_shading(True)
    seg.reset()
    assert (seg.current_name, seg.meshes, seg.smooth_shading) == ("", {}, False)
