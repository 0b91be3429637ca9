import unittest
from unittest.mock import patch

from mezzanine.controller.transient import TransientGraphicsManager
from mezzanine.errors import HostError
from mezzanine.host.memory import ElementKind
from mezzanine.model.geometry_primitives import Point

from host_fixtures import make_document


class TestTransientGraphicsManager(unittest.TestCase):

    def setUp(self):
        self.doc = make_document()
        self.previews = TransientGraphicsManager(self.doc)

    def test_each_preview_is_its_own_transaction(self):
        self.previews.add_preview_segment(Point(0.0, 0.0), Point(1.0, 0.0))
        self.previews.add_preview_segment(Point(1.0, 0.0), Point(1.0, 1.0))
        self.assertEqual(self.doc.committed_transactions, ["Preview Line", "Preview Line"])
        self.assertEqual(len(self.doc.elements_of_kind(ElementKind.PREVIEW)), 2)
        self.assertFalse(self.doc.in_transaction)

    def test_release_all_removes_previews(self):
        self.previews.add_preview_segment(Point(0.0, 0.0), Point(1.0, 0.0))
        self.previews.release_all()
        self.assertEqual(self.doc.elements, {})
        self.assertEqual(self.previews.handles, [])

    def test_release_all_is_idempotent(self):
        self.previews.add_preview_segment(Point(0.0, 0.0), Point(1.0, 0.0))
        self.previews.release_all()
        committed = list(self.doc.committed_transactions)
        self.previews.release_all()
        self.assertEqual(self.doc.committed_transactions, committed)

    def test_release_all_empty_does_nothing(self):
        self.previews.release_all()
        self.assertEqual(self.doc.committed_transactions, [])

    def test_context_exit_releases(self):
        with TransientGraphicsManager(self.doc) as previews:
            previews.add_preview_segment(Point(0.0, 0.0), Point(1.0, 0.0))
        self.assertEqual(self.doc.elements, {})

    def test_context_exit_releases_on_error(self):
        with self.assertRaises(RuntimeError):
            with TransientGraphicsManager(self.doc) as previews:
                previews.add_preview_segment(Point(0.0, 0.0), Point(1.0, 0.0))
                raise RuntimeError("boom")
        self.assertEqual(self.doc.elements, {})

    def test_cleanup_failure_does_not_mask_original_error(self):
        with patch.object(self.doc, "delete_entities", side_effect=HostError("locked")):
            with self.assertRaises(RuntimeError) as ctx:
                with TransientGraphicsManager(self.doc) as previews:
                    previews.add_preview_segment(Point(0.0, 0.0), Point(1.0, 0.0))
                    raise RuntimeError("original")
        self.assertEqual(str(ctx.exception), "original")
        self.assertFalse(self.doc.in_transaction)

    def test_cleanup_failure_without_original_error_propagates(self):
        with patch.object(self.doc, "delete_entities", side_effect=HostError("locked")):
            with self.assertRaises(HostError):
                with TransientGraphicsManager(self.doc) as previews:
                    previews.add_preview_segment(Point(0.0, 0.0), Point(1.0, 0.0))
        self.assertFalse(self.doc.in_transaction)

    def test_mark_released_forgets_handles(self):
        self.previews.add_preview_segment(Point(0.0, 0.0), Point(1.0, 0.0))
        self.doc.begin_transaction("outer")
        self.previews.discard_in_transaction()
        self.doc.commit()
        self.previews.mark_released()
        self.previews.release_all()
        self.assertEqual(self.doc.committed_transactions, ["Preview Line", "outer"])


if __name__ == "__main__":
    unittest.main()
