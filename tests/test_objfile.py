import pytest

from wireframe3d.geometry import Triangle, Vec3d
from wireframe3d.objfile import ObjFormatError, load_obj, parse_obj

SIMPLE = [
    "# a single triangle\n",
    "v 0 0 0\n",
    "v 1 0 0\n",
    "v 0 1 0\n",
    "f 1 2 3\n",
]


def test_parse_single_triangle():
    mesh = parse_obj(SIMPLE)
    assert mesh.triangles == [
        Triangle(Vec3d(0, 0, 0), Vec3d(1, 0, 0), Vec3d(0, 1, 0))
    ]


def test_face_with_texture_and_normal_indices():
    lines = SIMPLE[:-1] + ["f 3/1/1 2/2/2 1/3/3\n"]
    mesh = parse_obj(lines)
    assert mesh.triangles == [
        Triangle(Vec3d(0, 1, 0), Vec3d(1, 0, 0), Vec3d(0, 0, 0))
    ]


def test_only_first_three_face_indices_are_used():
    lines = ["v 0 0 0", "v 1 0 0", "v 1 1 0", "v 0 1 0", "f 1 2 3 4"]
    mesh = parse_obj(lines)
    assert len(mesh) == 1
    assert mesh.triangles[0] == Triangle(Vec3d(0, 0, 0), Vec3d(1, 0, 0), Vec3d(1, 1, 0))


def test_faces_may_reference_vertices_defined_later():
    lines = ["f 1 2 3", "v 2 0 0", "v 0 2 0", "v 0 0 2"]
    mesh = parse_obj(lines)
    assert mesh.triangles[0].c == Vec3d(0, 0, 2)


def test_other_statements_are_ignored():
    lines = ["o ship", "s off"] + SIMPLE
    assert len(parse_obj(lines)) == 1


def test_index_out_of_range_raises():
    with pytest.raises(ObjFormatError):
        parse_obj(["v 0 0 0", "f 1 2 3"])


def test_zero_index_raises():
    with pytest.raises(ObjFormatError):
        parse_obj(SIMPLE[:-1] + ["f 0 1 2"])


def test_bad_coordinate_raises():
    with pytest.raises(ObjFormatError):
        parse_obj(["v 0 zero 0"])


def test_short_face_raises():
    with pytest.raises(ObjFormatError):
        parse_obj(SIMPLE[:-1] + ["f 1 2"])


def test_load_obj_matches_parse(tmp_path):
    path = tmp_path / "model.obj"
    path.write_text("".join(SIMPLE), encoding="utf-8")
    assert load_obj(path).triangles == parse_obj(SIMPLE).triangles


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_obj(tmp_path / "absent.obj")