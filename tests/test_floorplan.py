"""Tests for floor plan parsing, validation and serialization."""

from __future__ import annotations

import json
import unittest

from src.geometry import Point
from src.pipeline.floorplan import (
    AccuracyResult, FloorPlan, FloorPlanParseError, ScoreBreakdown,
    accuracy_to_dict, columns_to_list, floor_plan_to_dict,
    parse_columns, parse_export, parse_floor_plan, plan_stem,
    validate_floor_plan,
)
from tests.plan_fixtures import column, export_dict, make_sliver_plan, make_square_plan


class TestParsing(unittest.TestCase):

    def test_floor_plan_round_trip(self):
        plan = make_square_plan()
        self.assertEqual(parse_floor_plan(floor_plan_to_dict(plan)), plan)

    def test_z_defaults_to_zero(self):
        plan = parse_floor_plan({"name": "p", "points": [{"x": 1, "y": "2"}]})
        self.assertEqual(plan.points, [Point(1.0, 2.0, 0.0)])
        self.assertEqual(plan.id, "")

    def test_missing_points(self):
        with self.assertRaises(FloorPlanParseError) as ctx:
            parse_floor_plan({"name": "p"})
        self.assertEqual(ctx.exception.field_name, "floorPlan.points")

    def test_non_numeric_coordinate(self):
        with self.assertRaises(FloorPlanParseError) as ctx:
            parse_floor_plan({"name": "p", "points": [{"x": 0, "y": 0}, {"x": "east", "y": 1}]})
        self.assertEqual(ctx.exception.field_name, "floorPlan.points[1].x")
        self.assertIsInstance(ctx.exception, ValueError)

    def test_coordinate_too_large_for_float(self):
        with self.assertRaises(FloorPlanParseError) as ctx:
            parse_floor_plan({"name": "p", "points": [{"x": 10 ** 400, "y": 0}]})
        self.assertEqual(ctx.exception.field_name, "floorPlan.points[0].x")

    def test_columns_defaults_and_order(self):
        cols = parse_columns([
            {"position": {"x": 1, "y": 2}},
            {"id": "b", "position": {"x": 3, "y": 4, "z": 0}, "size": 0.8},
        ])
        self.assertEqual([c.id for c in cols], ["col1", "b"])
        self.assertEqual(cols[0].size, 0.5)
        self.assertEqual(cols[1].position, Point(3, 4, 0))

    def test_column_without_position(self):
        with self.assertRaises(FloorPlanParseError):
            parse_columns([{"id": "a"}])

    def test_parse_export(self):
        cols = [column("c1", 2, 3), column("c2", 5, 7)]
        raw = json.loads(json.dumps(export_dict(make_square_plan("curve90.csv"), cols,
                                                username="ana@example.com",
                                                engineer_type="structural")))
        record = parse_export(raw)
        self.assertEqual(record.floor_plan_name, "curve90.csv")
        self.assertEqual(record.columns, cols)
        self.assertEqual(record.username, "ana@example.com")
        self.assertEqual(record.engineer_type, "structural")

    def test_parse_export_bad_section(self):
        with self.assertRaises(FloorPlanParseError):
            parse_export({"floorPlan": "curve90.csv"})

    def test_plan_stem(self):
        self.assertEqual(plan_stem("curve90.csv"), "curve90")
        self.assertEqual(plan_stem("curve90"), "curve90")
        self.assertEqual(FloorPlan(name="A.CSV", points=[]).stem, "A")
        self.assertEqual(plan_stem("a.csv.bak"), "a.csv.bak")


class TestValidation(unittest.TestCase):

    def test_clean_square(self):
        self.assertEqual(validate_floor_plan(make_square_plan()), [])

    def test_too_few_vertices(self):
        warnings = validate_floor_plan(make_sliver_plan())
        self.assertEqual(len(warnings), 1)
        self.assertIn("only 2 vertices", warnings[0])

    def test_collinear_outline(self):
        plan = FloorPlan(name="line", points=[Point(0, 0), Point(5, 0), Point(10, 0)])
        warnings = validate_floor_plan(plan)
        self.assertTrue(any("degenerate" in w for w in warnings))

    def test_self_intersecting(self):
        plan = FloorPlan(name="bowtie", points=[
            Point(0, 0), Point(10, 10), Point(10, 0), Point(0, 4),
        ])
        warnings = validate_floor_plan(plan)
        self.assertTrue(any("not a simple polygon" in w for w in warnings), warnings)

    def test_raised_vertices(self):
        plan = FloorPlan(name="raised", points=[
            Point(0, 0, 1), Point(10, 0, 0), Point(10, 10, 0), Point(0, 10, 0),
        ])
        warnings = validate_floor_plan(plan)
        self.assertTrue(any("non-zero z" in w for w in warnings))


class TestSerialization(unittest.TestCase):

    def test_accuracy_to_dict(self):
        result = AccuracyResult(score=80, feedback="f", details="d")
        self.assertEqual(accuracy_to_dict(result), {"score": 80, "feedback": "f", "details": "d"})

    def test_accuracy_to_dict_with_breakdown(self):
        result = AccuracyResult(score=80, feedback="f", details="d")
        bd = ScoreBreakdown(
            optimal_positions=[Point(2.5, 2.5)],
            session_similarities=[0.5, 0.25],
            optimality_percent=80,
            similarity_percent=38,
        )
        out = accuracy_to_dict(result, bd)
        self.assertEqual(out["similarityPercent"], 38)
        self.assertEqual(out["historySessions"], 2)
        self.assertEqual(out["optimalPositions"], [{"x": 2.5, "y": 2.5, "z": 0.0}])
        json.dumps(out)

    def test_columns_to_list(self):
        out = columns_to_list([column("c1", 1, 2, size=0.7)])
        self.assertEqual(out, [{"id": "c1", "position": {"x": 1, "y": 2, "z": 0}, "size": 0.7}])


if __name__ == "__main__":
    unittest.main()
