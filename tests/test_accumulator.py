import unittest

from mezzanine import config
from mezzanine.controller.accumulator import CaptureState, GeometryAccumulator
from mezzanine.controller.transient import TransientGraphicsManager
from mezzanine.host.memory import ElementKind, ScriptedView
from mezzanine.model.geometry_primitives import Point

from host_fixtures import make_document


class TestGeometryAccumulator(unittest.TestCase):

    def setUp(self):
        self.doc = make_document()
        self.previews = TransientGraphicsManager(self.doc)

    def _accumulator(self, picks):
        self.view = ScriptedView(picks)
        return GeometryAccumulator(self.view, self.previews)

    def test_elevation_locked_to_first_point(self):
        acc = self._accumulator([Point(0.0, 0.0, 1.5), Point(2.0, 0.0, 4.0), Point(2.0, 2.0, -3.0)])
        points = acc.capture()
        self.assertEqual([p.z for p in points], [1.5, 1.5, 1.5])
        self.assertEqual(points[1], Point(2.0, 0.0, 1.5))

    def test_preview_per_segment_and_refresh(self):
        acc = self._accumulator([Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0)])
        acc.capture()
        self.assertEqual(len(self.previews.handles), 2)
        self.assertEqual(len(self.doc.elements_of_kind(ElementKind.PREVIEW)), 2)
        self.assertEqual(self.view.refresh_count, 2)

    def test_prompts_and_snaps(self):
        acc = self._accumulator([Point(0.0, 0.0), Point(1.0, 0.0)])
        acc.capture()
        self.assertEqual(
            self.view.prompts,
            [config.FIRST_POINT_PROMPT, config.NEXT_POINT_PROMPT, config.NEXT_POINT_PROMPT],
        )
        self.assertTrue(all(s == config.DEFAULT_SNAP_MODES for s in self.view.snap_modes))

    def test_repeated_pick_ignored(self):
        acc = self._accumulator([Point(0.0, 0.0), Point(1.0, 0.0, 0.0), Point(1.0, 0.0, 5.0), Point(1.0, 1.0)])
        points = acc.capture()
        self.assertEqual(len(points), 3)
        self.assertEqual(len(self.previews.handles), 2)

    def test_cancel_stops_capture(self):
        acc = self._accumulator([Point(0.0, 0.0), None, Point(5.0, 5.0)])
        self.assertEqual(len(acc.capture()), 1)
        self.assertEqual(acc.state, CaptureState.ABANDONED)

    def test_immediate_cancel(self):
        acc = self._accumulator([])
        self.assertEqual(acc.capture(), [])
        self.assertEqual(acc.state, CaptureState.ABANDONED)
        self.assertEqual(self.doc.committed_transactions, [])

    def test_closed_state(self):
        acc = self._accumulator([Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0)])
        self.assertEqual(acc.state, CaptureState.AWAITING_POINT)
        acc.capture_point()
        self.assertEqual(acc.state, CaptureState.ACCUMULATING)
        acc.capture()
        self.assertEqual(acc.state, CaptureState.CLOSED)


if __name__ == "__main__":
    unittest.main()
