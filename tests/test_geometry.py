import math

import numpy as np
import pytest

from screwkin import geometry as g


def _random_unit_twist(rng):
    tw = rng.uniform(-1, 1, 6)
    return tw / np.linalg.norm(tw[3:])


def _random_pose(rng):
    axis = rng.uniform(-1, 1, 3)
    axis /= np.linalg.norm(axis)
    t = np.eye(4)
    t[:3, :3] = g.w_to_rotation(axis, math.pi / 4)
    t[:3, 3] = rng.uniform(-1, 1, 3)
    return t


def test_hat_vee_roundtrip_3():
    a = np.array([1.0, -2.0, 3.0])
    m = g.hat(a)
    assert np.allclose(m, -m.T)
    assert np.allclose(g.vee(m), a)


def test_hat_is_cross_product():
    a = np.array([0.3, -1.2, 2.0])
    b = np.array([1.5, 0.4, -0.7])
    assert np.allclose(g.hat(a) @ b, np.cross(a, b))


def test_hat_vee_roundtrip_6():
    tw = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    m = g.hat(tw)
    assert m.shape == (4, 4)
    assert np.allclose(m[:3, 3], tw[:3])
    assert np.allclose(g.vee(m), tw)


def test_hat_bad_length():
    with pytest.raises(ValueError):
        g.hat([1.0, 2.0])


def test_vee_bad_shape():
    with pytest.raises(ValueError):
        g.vee(np.zeros((2, 2)))


def test_adjoint_translation_only():
    mat = np.array([[1, 0, 0, 0], [0, 1, 0, 2], [0, 0, 1, 0], [0, 0, 0, 0]], dtype=float)
    res = g.adjoint(mat)
    assert np.allclose(res[:3, :3], np.eye(3))
    assert np.allclose(res[3:, 3:], np.eye(3))
    assert np.allclose(res[:3, 3:], g.hat([0, 2, 0]))
    assert np.allclose(res[3:, :3], 0)


def test_pos_mat_to_transform():
    pos = [1.0, 2.0, 3.0]
    mat = [0, -1, 0, 1, 0, 0, 0, 0, 1]
    t = g.pos_mat_to_transform(pos, mat)
    assert np.allclose(t[:3, :3], np.array(mat).reshape(3, 3))
    assert np.allclose(t[:3, 3], pos)
    assert np.allclose(t[3], [0, 0, 0, 1])


def test_quat_identity_and_orthonormal():
    assert np.allclose(g.quat_to_rotation([1, 0, 0, 0]), np.eye(3))
    q = np.array([0.5, 0.5, -0.5, 0.5])
    r = g.quat_to_rotation(q)
    assert np.allclose(r @ r.T, np.eye(3))
    assert np.isclose(np.linalg.det(r), 1.0)


def test_pos_quat_to_transform():
    t = g.pos_quat_to_transform([1, 2, 3], [1, 0, 0, 0])
    assert np.allclose(t[:3, :3], np.eye(3))
    assert np.allclose(t[:3, 3], [1, 2, 3])


def test_rotation_about_z():
    theta = 30.0 / 180 * math.pi
    r = g.w_to_rotation([0, 0, 1], theta)
    angle, axis = g.rot_to_axis_angle(r)
    assert angle == pytest.approx(theta)
    assert np.allclose(axis, [0, 0, 1])
    w, th = g.rotation_to_w(r)
    assert th == pytest.approx(theta)
    so3, th2 = g.rotation_to_so3(r)
    assert np.allclose(g.so3_exp(so3, th2), r)


def test_identity_rotation_gives_zero():
    w, theta = g.rotation_to_w(np.eye(3))
    assert theta == 0.0
    assert np.allclose(w, 0)
    angle, axis = g.rot_to_axis_angle(np.eye(3))
    assert angle == 0.0
    assert np.isclose(np.linalg.norm(axis), 1.0)


def test_twist_roundtrip():
    rng = np.random.default_rng(3)
    for _ in range(5):
        tw = _random_unit_twist(rng)
        theta = 0.8
        t = g.twist_to_transform(tw, theta)
        back, th = g.transform_to_twist(t)
        assert th == pytest.approx(theta)
        assert np.allclose(back, tw)


def test_pure_translation():
    v = np.array([0.6, 0.0, 0.8])
    tw = np.concatenate([v, np.zeros(3)])
    t = g.twist_to_transform(tw, 12.0)
    assert np.allclose(t[:3, :3], np.eye(3))
    assert np.allclose(t[:3, 3], v * 12.0)
    back, th = g.transform_to_twist(t)
    assert th == pytest.approx(12.0)
    assert np.allclose(back, tw)
    se3, th2 = g.transform_to_se3(t)
    assert np.allclose(g.se3_exp(se3, th2), t)


def test_identity_transform_gives_zero_twist():
    tw, theta = g.transform_to_twist(np.eye(4))
    assert theta == 0.0
    assert np.allclose(tw, 0)


def test_twist_to_unit_twist_cases():
    tw, th = g.twist_to_unit_twist(np.zeros(6))
    assert th == 0.0 and np.allclose(tw, 0)
    tw, th = g.twist_to_unit_twist([3, 0, 4, 0, 0, 0])
    assert th == pytest.approx(5.0)
    assert np.allclose(tw * th, [3, 0, 4, 0, 0, 0])
    tw, th = g.twist_to_unit_twist([1, 1, 1, 0, 3, 4])
    assert th == pytest.approx(5.0)
    assert np.isclose(np.linalg.norm(tw[3:]), 1.0)


def test_incremental_application_matches_direct():
    rng = np.random.default_rng(7)
    tw = _random_unit_twist(rng)
    theta = math.pi / 6
    pose = _random_pose(rng)
    direct = g.twist_to_transform(tw, theta) @ pose
    step = g.twist_to_transform(tw, theta / 10)
    iterated = pose
    for _ in range(10):
        iterated = step @ iterated
    assert np.allclose(direct, iterated)


def test_rel_transform_and_pose_to_twist():
    rng = np.random.default_rng(11)
    start = _random_pose(rng)
    goal = _random_pose(rng)
    rel = g.pose_to_rel_transform(start, goal)
    assert np.allclose(rel @ start, goal)
    tw, theta = g.pose_to_twist(start, goal)
    assert np.allclose(g.twist_to_transform(tw, theta) @ start, goal)


def test_pq_variants_match_matrix_variants():
    sp, sq = [0.1, 0.2, 0.3], [1, 0, 0, 0]
    q = np.array([0.9, 0.1, 0.3, -0.2])
    q /= np.linalg.norm(q)
    gp = [1.0, -1.0, 0.5]
    start = g.pos_quat_to_transform(sp, sq)
    goal = g.pos_quat_to_transform(gp, q)
    assert np.allclose(g.pose_to_rel_transform_pq(sp, sq, gp, q), g.pose_to_rel_transform(start, goal))
    tw1, th1 = g.pose_to_twist_pq(sp, sq, gp, q)
    tw2, th2 = g.pose_to_twist(start, goal)
    assert th1 == pytest.approx(th2)
    assert np.allclose(tw1, tw2)