# -*- coding: utf-8 -*-
import numpy as np
import pytest
from conftest import make_block
from movingblocks.math import Mat4, Vec2
from movingblocks.scene import Scene, generate_random_blocks


def snapshot(scene):
    return [(b.transform.to_np(), b.is_hit) for b in scene.traverse()]


# ---------------------------------------------------------------
# advance
# ---------------------------------------------------------------
@pytest.mark.parametrize("n", [0, 1, 5, 100])
def test_advance_pure_translation_is_matrix_power(n):
    delta = Mat4.translate(0.5, -0.25)
    block = make_block(delta=delta)
    for _ in range(n):
        block.advance()
    assert block.transform.is_close(delta ** n)
    assert block.transform.is_close(Mat4.translate(0.5 * n, -0.25 * n))

@pytest.mark.parametrize("n", [5, 100])
def test_advance_with_rotation_compounds(n):
    delta = Mat4.translate(1.0, 0.0) @ Mat4.rotate_z(10.0)
    block = make_block(delta=delta)
    for _ in range(n):
        block.advance()
    assert block.transform.is_close(delta ** n)
    naive = Mat4.translate(1.0 * n, 0.0) @ Mat4.rotate_z(10.0 * n)
    assert not block.transform.is_close(naive)

def test_advance_applies_delta_in_local_frame():
    delta = Mat4.translate(1.0, 0.0) @ Mat4.rotate_z(90.0)
    block = make_block(delta=delta)
    block.advance()
    block.advance()
    # второй шаг сдвигает уже вдоль повёрнутой оси X
    origin = block.transform.transform_point(Vec2(0, 0))
    assert origin.is_close(Vec2(1.0, 1.0))

def test_advance_visits_every_node_once():
    root = generate_random_blocks(3, 3, seed=7)
    scene = Scene(root)
    scene.advance()
    for block in scene.traverse():
        assert block.transform.is_close(block.delta_transform)

def test_advance_is_deterministic():
    a = Scene(generate_random_blocks(3, 2, seed=42))
    b = Scene(generate_random_blocks(3, 2, seed=42))
    for _ in range(25):
        a.advance()
        b.advance()
    for x, y in zip(a.traverse(), b.traverse()):
        assert np.array_equal(x.transform.to_np(), y.transform.to_np())

def test_advance_independent_of_sibling_order():
    d1 = Mat4.translate(0.1, 0.0) @ Mat4.rotate_z(1.0)
    d2 = Mat4.translate(0.0, 0.3) @ Mat4.rotate_z(-2.0)
    a1, a2 = make_block(delta=d1), make_block(delta=d2)
    b1, b2 = make_block(delta=d1), make_block(delta=d2)
    first = Scene(make_block(children=[a1, a2]))
    second = Scene(make_block(children=[b2, b1]))
    for _ in range(10):
        first.advance()
        second.advance()
    assert np.array_equal(a1.transform.to_np(), b1.transform.to_np())
    assert np.array_equal(a2.transform.to_np(), b2.transform.to_np())


# ---------------------------------------------------------------
# probe
# ---------------------------------------------------------------
@pytest.mark.parametrize("point, expected", [
    ((100, 100), True),
    ((150, 199.5), True),
    ((200, 200), False),
    ((200, 150), False),
    ((50, 50), False),
])
def test_probe_containment_boundary(point, expected):
    leaf = make_block(offset=(100, 100), size=(100, 100))
    leaf.probe(Vec2(*point))
    assert leaf.is_hit is expected

def test_probe_maps_children_through_inverse_transform(nested_scene):
    parent = nested_scene.root
    child = parent.children[0]

    nested_scene.probe(Vec2(7, 7))
    assert child.is_hit

    nested_scene.advance()
    nested_scene.probe(Vec2(7, 7))
    assert parent.is_hit
    assert not child.is_hit

    nested_scene.probe(Vec2(17, 7))
    assert child.is_hit

def test_probe_passes_unoffset_point_to_children():
    child = make_block(offset=(0, 0), size=(10, 10))
    parent = make_block(offset=(50, 50), size=(100, 100), children=[child])
    parent.probe(Vec2(5, 5))
    assert not parent.is_hit
    assert child.is_hit

def test_probe_survives_singular_transform():
    great = make_block(size=(1000, 1000))
    grand = make_block(size=(1000, 1000), children=[great])
    bad = make_block(size=(1000, 1000), delta=Mat4.scale(0.0, 0.0), children=[grand])
    good_leaf = make_block(size=(1000, 1000))
    good = make_block(size=(1000, 1000), children=[good_leaf])
    scene = Scene(make_block(size=(1000, 1000), children=[bad, good]))

    scene.probe(Vec2(5, 5))
    assert all(b.is_hit for b in scene.traverse())

    scene.advance()
    assert not bad.transform.is_invertible()
    scene.probe(Vec2(5, 5))

    assert bad.is_hit
    assert not grand.is_hit
    assert not great.is_hit
    assert good.is_hit
    assert good_leaf.is_hit

def test_small_scale_parent_still_maps_children():
    child = make_block(size=(10, 10))
    parent = make_block(size=(1000, 1000), delta=Mat4.scale(1e-7, 1e-7), children=[child])
    scene = Scene(parent)
    scene.advance()
    assert parent.transform.is_invertible()
    scene.probe(Vec2(5e-7, 5e-7))
    assert child.is_hit
    scene.probe(Vec2(2e-6, 2e-6))
    assert not child.is_hit

def test_probe_twice_is_idempotent():
    scene = Scene(generate_random_blocks(3, 3, seed=3))
    for _ in range(50):
        scene.advance()
    scene.probe(Vec2(150, 150))
    first = snapshot(scene)
    assert any(h for _, h in first)
    scene.probe(Vec2(150, 150))
    second = snapshot(scene)
    for (t1, h1), (t2, h2) in zip(first, second):
        assert np.array_equal(t1, t2)
        assert h1 == h2

def test_probe_does_not_touch_transforms():
    scene = Scene(generate_random_blocks(2, 2, seed=11))
    scene.advance()
    before = [b.transform.to_np() for b in scene.traverse()]
    scene.probe(Vec2(120, 130))
    after = [b.transform.to_np() for b in scene.traverse()]
    for x, y in zip(before, after):
        assert np.array_equal(x, y)


# ---------------------------------------------------------------
# ownership
# ---------------------------------------------------------------
def test_child_cannot_have_two_parents():
    child = make_block()
    make_block(children=[child])
    with pytest.raises(ValueError):
        make_block(children=[child])

def test_cycles_are_rejected():
    child = make_block()
    root = make_block(children=[child])
    with pytest.raises(ValueError):
        root.add_child(root)
    with pytest.raises(ValueError):
        child.add_child(root)

def test_removed_child_can_be_adopted():
    child = make_block()
    first = make_block(children=[child])
    first.remove_child(child)
    assert child.parent is None
    second = make_block(children=[child])
    assert child.parent is second
    assert first.children == ()

def test_delta_transform_cannot_be_mutated():
    delta = Mat4.translate(1, 0)
    block = make_block(delta=delta)
    with pytest.raises(ValueError):
        delta.m[0, 3] = 99.0
    assert block.delta_transform.is_close(Mat4.translate(1, 0))

def test_accumulated_transform_cannot_be_mutated():
    block = make_block(delta=Mat4.translate(1, 0))
    block.advance()
    with pytest.raises(ValueError):
        block.transform.m[0, 3] = 500.0
    block.advance()
    assert block.transform.is_close(Mat4.translate(2, 0))

def test_offset_is_read_only():
    block = make_block(offset=(3, 4))
    with pytest.raises(AttributeError):
        block.offset.x = 5.0
    assert block.offset.is_close(Vec2(3, 4))

def test_tree_metrics():
    root = generate_random_blocks(2, 3, seed=0)
    assert root.count() == 1 + 3 + 9
    assert root.depth() == 2


# ---------------------------------------------------------------
# scene
# ---------------------------------------------------------------
def test_scene_rejects_non_root():
    child = make_block()
    make_block(children=[child])
    with pytest.raises(ValueError):
        Scene(child)

def test_update_without_pointer_skips_probe(nested_scene):
    nested_scene.probe(Vec2(7, 7))
    child = nested_scene.root.children[0]
    assert child.is_hit

    nested_scene.update(0.016)
    assert child.is_hit
    assert nested_scene.frame == 1
    assert nested_scene.root.transform.is_close(Mat4.translate(10, 0))

def test_update_with_pointer_probes_after_advance(nested_scene):
    child = nested_scene.root.children[0]
    nested_scene.update(0.016, Vec2(7, 7))
    assert not child.is_hit
    nested_scene.update(0.016, Vec2(27, 7))
    assert child.is_hit
    assert nested_scene.elapsed == pytest.approx(0.032)

def test_update_signals_listeners_once(nested_scene):
    calls = []
    listener = calls.append
    nested_scene.add_listener(listener)
    nested_scene.update(0.016, Vec2(1, 1))
    assert calls == [nested_scene]
    nested_scene.remove_listener(listener)
    nested_scene.update(0.016)
    assert len(calls) == 1

def test_walk_yields_parent_chain(nested_scene):
    nested_scene.advance()
    nested_scene.advance()
    pairs = list(nested_scene.walk())
    assert [b for b, _ in pairs] == list(nested_scene.traverse())
    root_chain, child_chain = pairs[0][1], pairs[1][1]
    assert root_chain.is_close(Mat4.identity())
    assert child_chain.is_close(Mat4.translate(20, 0))

def test_global_offset(nested_scene):
    nested_scene.advance()
    child = nested_scene.root.children[0]
    assert nested_scene.global_offset(child).is_close(Vec2(15, 5))
    assert nested_scene.global_offset(nested_scene.root).is_close(Vec2(0, 0))

def test_hits_with_global_positions(nested_scene):
    nested_scene.update(0.016, Vec2(17, 7))
    hits = nested_scene.hits_with_global_positions()
    assert [b for b, _ in hits] == nested_scene.hit_blocks()
    positions = dict((id(b), p) for b, p in hits)
    child = nested_scene.root.children[0]
    assert positions[id(child)].is_close(Vec2(15, 5))
