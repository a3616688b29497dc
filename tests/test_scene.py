import pytest

from minirt.color import rgb_to_hex
from minirt.elements import Ambient, Camera, Cylinder, Light, Plane, Sphere
from minirt.scene import SceneError, SceneParser, load_scene, read_scene
from minirt.vec3 import Vec3

SAMPLE = [
    "A 0.2 255,255,255\n",
    "C -50,0,20 0,0,1 70\n",
    "L -40,0,30 0.7 255,255,255\n",
    "pl 0,0,0 0,1,0 255,0,225\n",
    "sp 0,0,20 20 255,0,0\n",
    "cy 50,0,20.6 0,0,1 14.2 21.42 10,0,255\n",
]


def test_read_scene_keeps_order():
    elements = list(read_scene(SAMPLE))
    assert [type(e) for e in elements] == [Ambient, Camera, Light, Plane, Sphere, Cylinder]


def test_read_scene_fields():
    ambient, camera, light, plane, sphere, cylinder = read_scene(SAMPLE)
    assert ambient.ratio == pytest.approx(0.2)
    assert ambient.color == rgb_to_hex(255, 255, 255)
    assert camera.pos == Vec3(-50, 0, 20)
    assert camera.axis == Vec3(0, 0, 1)
    assert camera.fov == 70
    assert light.ratio == pytest.approx(0.7)
    assert plane.axis == Vec3(0, 1, 0)
    assert sphere.diameter == pytest.approx(20)
    assert sphere.color == rgb_to_hex(255, 0, 0)
    assert cylinder.pos == Vec3(50, 0, 20.6)
    assert cylinder.diameter == pytest.approx(14.2)
    assert cylinder.height == pytest.approx(21.42)
    assert cylinder.color == rgb_to_hex(10, 0, 255)


def test_text_and_lines_give_same_scene():
    assert list(read_scene("".join(SAMPLE))) == list(read_scene(SAMPLE))


def test_last_line_without_newline():
    elements = read_scene("sp 0,0,0 2 1,2,3")
    assert list(elements) == [Sphere(pos=Vec3(0, 0, 0), diameter=2.0, color=rgb_to_hex(1, 2, 3))]


@pytest.mark.parametrize("line", SAMPLE[:3])
def test_unique_elements_cannot_repeat(line):
    with pytest.raises(SceneError):
        read_scene([line, line])


def test_shapes_can_repeat():
    assert len(read_scene([SAMPLE[4], SAMPLE[4], SAMPLE[3]])) == 3


def test_blank_line_is_an_error():
    with pytest.raises(SceneError):
        read_scene([SAMPLE[0], "\n", SAMPLE[1]])


def test_space_only_line_is_skipped():
    assert len(read_scene(["   ", SAMPLE[0]])) == 1


@pytest.mark.parametrize("source", [[], ""])
def test_empty_scene_is_an_error(source):
    with pytest.raises(SceneError):
        read_scene(source)


@pytest.mark.parametrize(
    "line",
    [
        "xx 1\n",
        "A 1.5 255,255,255\n",
        "A 0.2 256,0,0\n",
        "A 0.2\n",
        "A 0.2 255,255,255 \n",
        "C 0,0,0 0,0,1 129\n",
        "C 0,0,0 0,0,1 -1\n",
        "C 0,0 0,0,1 70\n",
        "L 0,0,0 1.5 255,255,255\n",
        "sp 0,0,0 -1 255,0,0\n",
        "pl 0,0,0 0,1 255,0,0\n",
        "cy 0,0,0 0,0,1 abc 1 255,0,0\n",
        "cy 0,0,0 0,0,1 1 -2 255,0,0\n",
        "cy 0,0,0 0,0,1 1 2\n",
    ],
)
def test_invalid_lines(line):
    with pytest.raises(SceneError):
        read_scene([line])


@pytest.mark.parametrize("fov", [0, 128])
def test_camera_fov_limits(fov):
    (camera,) = read_scene([f"C 0,0,0 0,0,1 {fov}\n"])
    assert camera.fov == fov


def test_parse_line_adds_element():
    parser = SceneParser()
    element = parser.parse_line(["sp", "0,0,0", "2", "1,2,3"])
    assert element == Sphere(pos=Vec3(0, 0, 0), diameter=2.0, color=rgb_to_hex(1, 2, 3))
    assert list(parser.elements) == [element]


def test_failed_unique_element_still_counts():
    parser = SceneParser()
    with pytest.raises(SceneError):
        parser.parse_line(["A", "5", "0,0,0"])
    with pytest.raises(SceneError):
        parser.parse_line(["A", "0.2", "0,0,0"])
    assert len(parser.elements) == 0


def test_load_scene(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text("".join(SAMPLE), encoding="utf-8")
    assert list(load_scene(path)) == list(read_scene(SAMPLE))