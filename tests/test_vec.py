from gapedit.vec import Vec2, vec2, vec2s


def test_vec2_components():
    v = vec2(1.5, -2.0)
    assert v.x == 1.5
    assert v.y == -2.0


def test_vec2s_equal_components():
    v = vec2s(3.25)
    assert v.x == v.y == 3.25


def test_vec2_equality_and_mutation():
    v = vec2(1, 2)
    assert v == Vec2(1.0, 2.0)
    v.x += 4
    assert v == Vec2(5.0, 2.0)


def test_default_is_origin():
    assert Vec2() == vec2s(0)