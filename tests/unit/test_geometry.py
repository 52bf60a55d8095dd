"""Unit tests for trace_lib.domain.geometry.

Tests the value objects used by the scorers:
    - Point: distance, interpolation, coercion from input-layer shapes
    - BBox: padding
    - Stroke: coercion, decimation, incremental capture
"""

import unittest

import numpy as np

from trace_lib.domain.geometry import BBox, Point, Stroke, points_to_array


class TestPoint(unittest.TestCase):

    def test_distance(self):
        self.assertEqual(Point(0, 0).distance_to(Point(3, 4)), 5.0)

    def test_distance_is_symmetric(self):
        a, b = Point(1.5, 2.0), Point(-4.0, 7.25)
        self.assertEqual(a.distance_to(b), b.distance_to(a))

    def test_lerp_endpoints_and_middle(self):
        a, b = Point(0, 0), Point(10, 20)
        self.assertEqual(a.lerp(b, 0.0), a)
        self.assertEqual(a.lerp(b, 1.0), b)
        self.assertEqual(a.lerp(b, 0.5), Point(5, 10))

    def test_immutable(self):
        p = Point(1, 2)
        with self.assertRaises(AttributeError):
            p.x = 5

    def test_coerce_shapes(self):
        self.assertEqual(Point.coerce((1, 2)), Point(1, 2))
        self.assertEqual(Point.coerce([1, 2]), Point(1, 2))
        self.assertEqual(Point.coerce({'x': 1, 'y': 2}), Point(1, 2))
        self.assertEqual(Point.coerce(np.array([1.0, 2.0])), Point(1, 2))
        p = Point(3, 4)
        self.assertIs(Point.coerce(p), p)

    def test_coerce_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            Point.coerce((1, 2, 3))
        with self.assertRaises(ValueError):
            Point.coerce({'x': 1})
        with self.assertRaises(TypeError):
            Point.coerce(5)
        with self.assertRaises(TypeError):
            Point.coerce('xy')

    def test_from_tuple(self):
        self.assertEqual(Point.from_tuple((1.5, 2)), Point(1.5, 2))
        self.assertEqual(Point(1.5, 2).to_tuple(), (1.5, 2))


class TestBBox(unittest.TestCase):

    def test_padded(self):
        box = BBox(10, 20, 30, 40).padded(5)
        self.assertEqual(box.to_tuple(), (5, 15, 35, 45))


class TestStroke(unittest.TestCase):

    def test_decimated(self):
        stroke = Stroke.from_tuples([(i, 0) for i in range(10)])
        self.assertEqual([p.x for p in stroke.decimated(3)], [0, 3, 6, 9])
        self.assertEqual(len(stroke.decimated(1)), 10)
        with self.assertRaises(ValueError):
            stroke.decimated(0)

    def test_coerce_from_input_layer(self):
        stroke = Stroke.coerce({'id': 17, 'points': [{'x': 1, 'y': 1}, {'x': 2, 'y': 3}]})
        self.assertEqual(stroke.points, [Point(1, 1), Point(2, 3)])

    def test_coerce_passthrough(self):
        stroke = Stroke([Point(0, 0)])
        self.assertIs(Stroke.coerce(stroke), stroke)

    def test_empty_stroke(self):
        stroke = Stroke()
        self.assertEqual(len(stroke), 0)
        self.assertEqual(list(stroke), [])
        self.assertEqual(stroke.decimated(3), [])

    def test_append_and_index(self):
        stroke = Stroke.from_tuples([(1, 2)])
        stroke.append(Point(3, 4))
        self.assertEqual(stroke[-1], Point(3, 4))
        self.assertEqual(len(stroke), 2)


class TestPointsToArray(unittest.TestCase):

    def test_shape(self):
        arr = points_to_array([Point(1, 2), Point(3, 4)])
        self.assertEqual(arr.shape, (2, 2))
        self.assertEqual(arr[1, 0], 3.0)

    def test_empty(self):
        self.assertEqual(points_to_array([]).shape, (0, 2))
