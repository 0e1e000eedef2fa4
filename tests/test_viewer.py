import pytest

pytest.importorskip("pygame")

from viewer import Viewer, Viewport


def test_viewport_round_trip():
    vp = Viewport((0, 1000, 0, 1000), 800, 800)
    assert vp.world_to_screen(500, 250) == (400, 200)
    assert vp.screen_to_world(400, 200) == (500.0, 250.0)


def test_viewport_with_offset_boundary():
    vp = Viewport((100, 300, -50, 50), 400, 200)
    assert vp.world_to_screen(100, -50) == (0, 0)
    assert vp.world_to_screen(300, 50) == (400, 200)
    assert vp.boundary_to_rect((150, 250, 0, 50)) == (100, 100, 200, 100)


def test_drag_to_boundary_sorts_edges():
    vp = Viewport((0, 800, 0, 800), 800, 800)
    assert vp.drag_to_boundary((300, 50), (100, 200)) == (100.0, 300.0, 50.0, 200.0)


def test_viewer_click_and_drag():
    viewer = Viewer(capacity=4, point_count=200, world_size=800, seed=9)
    assert viewer.tree.size() > 0
    before = viewer.tree.size()

    viewer.drag_start = (0, 0)
    viewer.handle_mouse_up((800, 800))
    assert viewer.query == (0.0, 800.0, 0.0, 800.0)
    assert len(viewer.found) == before
    assert "Found:" in viewer.status_string()

    viewer.drag_start = (5, 5)
    viewer.handle_mouse_up((6, 6))
    assert viewer.tree.size() in (before, before + 1)
