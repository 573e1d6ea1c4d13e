import pytest

from brickbreaker.objects import GameObject, MovableObject, Rect
from brickbreaker.vector import Vector2


class RecordingGraphics:
    def __init__(self):
        self.calls = []

    def render(self, rect, texture_path):
        self.calls.append((rect, texture_path))


def make(x, y, w=10, h=20):
    return GameObject("tex.bmp", x, y, w, h)


def test_rect_from_constructor():
    assert make(3, 4).rect == Rect(3, 4, 10, 20)


def test_rect_truncates_toward_zero():
    obj = make(0, 0)
    obj.pos = Vector2(3.7, -2.5)
    assert obj.rect == Rect(3, -2, 10, 20)


def test_coordinate_setters_store_integers():
    obj = make(0, 0)
    obj.x = 12.9
    obj.y = 7.2
    assert obj.pos == Vector2(12.0, 7.0)
    assert (obj.x, obj.y) == (12, 7)


def test_intersection_is_symmetric():
    a = make(0, 0)
    b = make(5, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_edges_do_not_intersect():
    a = make(0, 0)
    b = make(10, 0)
    c = make(0, 20)
    assert not a.intersects(b)
    assert not a.intersects(c)


def test_overlap_of_identical_objects_is_full_area():
    a = make(4, 4)
    b = make(4, 4)
    assert a.overlap(b) == a.width * a.height


def test_overlap_of_separate_objects_is_zero():
    assert make(0, 0).overlap(make(100, 100)) == 0.0


def test_overlap_is_symmetric():
    a = make(0, 0)
    b = make(5, 10)
    assert a.overlap(b) == b.overlap(a)
    assert 0 < a.overlap(b) < a.width * a.height


def test_deactivate():
    obj = make(0, 0)
    assert obj.active
    obj.deactivate()
    assert obj.active is False


def test_render_uses_given_position_and_own_size():
    graphics = RecordingGraphics()
    obj = make(1, 2)
    obj.render(graphics, 50, 60)
    assert graphics.calls == [(Rect(50, 60, 10, 20), "tex.bmp")]


def test_movable_object_is_abstract():
    with pytest.raises(TypeError):
        MovableObject("tex.bmp", 0, 0, 1, 1, 1.0)


def test_movable_object_subclass_keeps_velocity_and_speed():
    class Drifter(MovableObject):
        def move(self):
            self.pos = self.pos + self.velocity * self.speed

    d = Drifter("tex.bmp", 0, 0, 1, 1, 2.0, 1.0, -1.0)
    d.move()
    assert d.pos == Vector2(0, 0) + Vector2(1.0, -1.0) * 2.0