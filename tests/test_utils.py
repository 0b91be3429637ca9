import unittest

from mezzanine.host.base import Unit
from mezzanine.host.memory import InMemoryDocument
from mezzanine.utils import MM_PER_FOOT, feet_to_mm, mm_to_feet


class TestUnits(unittest.TestCase):

    def test_one_foot(self):
        self.assertAlmostEqual(mm_to_feet(304.8), 1.0)
        self.assertAlmostEqual(feet_to_mm(1.0), MM_PER_FOOT)

    def test_round_trip(self):
        for value in (0.0, 1.0, 2800.0, 3000.0, 12345.678):
            self.assertAlmostEqual(feet_to_mm(mm_to_feet(value)), value, places=9)

    def test_document_round_trip(self):
        doc = InMemoryDocument()
        for unit in Unit:
            internal = doc.convert_to_internal_units(2800.0, unit)
            self.assertAlmostEqual(doc.convert_from_internal_units(internal, unit), 2800.0, places=9)

    def test_document_meters(self):
        doc = InMemoryDocument()
        self.assertAlmostEqual(
            doc.convert_to_internal_units(2.8, Unit.METERS),
            doc.convert_to_internal_units(2800.0, Unit.MILLIMETERS),
        )


if __name__ == "__main__":
    unittest.main()
