"""Unit tests for path normalization.

Covers the individual steps (resample, indicative angle, rotation, scaling,
translation) and the invariances of the full pipeline.
"""

import math
import unittest

import numpy as np

from stroke_recognizer.core.exceptions import DegeneratePathError
from stroke_recognizer.core.matcher import optimal_distance, path_distance
from stroke_recognizer.core.normalizer import (
    indicative_angle,
    normalize,
    resample,
    rotate_to_zero,
    scale_to_square,
    translate_to_origin,
)
from stroke_recognizer.core.path import NormalizedPath, Path2D

from shapes import circle_points, line_points, rotate, scale, translate, triangle_points


class TestResample(unittest.TestCase):
    """Tests for resample."""

    def test_produces_requested_point_count(self):
        points = np.array(triangle_points())
        for n in (2, 16, 64, 100):
            with self.subTest(n=n):
                self.assertEqual(resample(points, n).shape, (n, 2))

    def test_keeps_endpoints(self):
        points = np.array(triangle_points())
        resampled = resample(points, 64)
        np.testing.assert_allclose(resampled[0], points[0])
        np.testing.assert_allclose(resampled[-1], points[-1])

    def test_equal_spacing_along_straight_path(self):
        """Unevenly spaced input on a line comes out evenly spaced."""
        points = np.array([(0.0, 0.0), (1.0, 0.0), (5.0, 0.0), (6.0, 0.0), (63.0, 0.0)])
        resampled = resample(points, 64)
        np.testing.assert_allclose(resampled[:, 0], np.arange(64.0), atol=1e-9)
        np.testing.assert_allclose(resampled[:, 1], 0.0)

    def test_interpolates_between_vertices(self):
        points = np.array([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)])
        resampled = resample(points, 5)
        expected = [(0, 0), (5, 0), (10, 0), (10, 5), (10, 10)]
        np.testing.assert_allclose(resampled, expected, atol=1e-9)

    def test_skips_duplicate_points(self):
        points = np.array([(0.0, 0.0), (0.0, 0.0), (10.0, 0.0), (10.0, 0.0)])
        resampled = resample(points, 3)
        np.testing.assert_allclose(resampled, [(0, 0), (5, 0), (10, 0)])

    def test_single_point_is_degenerate(self):
        with self.assertRaises(DegeneratePathError):
            resample(np.array([(3.0, 4.0)]), 64)

    def test_empty_path_is_degenerate(self):
        with self.assertRaises(DegeneratePathError):
            resample(np.empty((0, 2)), 64)

    def test_repeated_point_is_degenerate(self):
        with self.assertRaises(DegeneratePathError):
            resample(np.array([(1.0, 1.0)] * 10), 64)

    def test_non_finite_coordinates_are_degenerate(self):
        with self.assertRaises(DegeneratePathError):
            resample(np.array([(0.0, 0.0), (math.nan, 1.0)]), 64)

    def test_too_few_target_points(self):
        with self.assertRaises(ValueError):
            resample(np.array(triangle_points()), 1)


class TestNormalizationSteps(unittest.TestCase):
    """Tests for the geometric steps after resampling."""

    def test_indicative_angle_points_from_centroid_to_first_point(self):
        points = np.array([(0.0, 1.0), (0.0, -1.0)])
        self.assertAlmostEqual(indicative_angle(points), math.pi / 2)

    def test_rotate_to_zero_puts_first_point_on_positive_x_axis(self):
        points = resample(np.array(triangle_points()), 64)
        rotated = rotate_to_zero(points)
        centroid = rotated.mean(axis=0)
        self.assertAlmostEqual(rotated[0, 1], centroid[1], places=9)
        self.assertGreater(rotated[0, 0], centroid[0])
        self.assertAlmostEqual(indicative_angle(rotated), 0.0, places=9)

    def test_scale_to_square(self):
        points = np.array([(0.0, 0.0), (10.0, 0.0), (10.0, 50.0)])
        scaled = scale_to_square(points, 250.0)
        width, height = scaled.max(axis=0) - scaled.min(axis=0)
        self.assertAlmostEqual(width, 250.0)
        self.assertAlmostEqual(height, 250.0)

    def test_scale_leaves_flat_axis_alone(self):
        points = np.array([(0.0, 7.0), (5.0, 7.0), (20.0, 7.0)])
        scaled = scale_to_square(points, 250.0)
        self.assertTrue(np.all(np.isfinite(scaled)))
        np.testing.assert_allclose(scaled[:, 1], 7.0)
        self.assertAlmostEqual(scaled[:, 0].max() - scaled[:, 0].min(), 250.0)

    def test_scale_ignores_rounding_residue(self):
        points = np.array([(0.0, 0.0), (100.0, 1e-14), (200.0, -1e-14)])
        scaled = scale_to_square(points, 250.0)
        self.assertLess(np.abs(scaled[:, 1]).max(), 1e-12)

    def test_translate_to_origin(self):
        points = np.array([(10.0, 10.0), (20.0, 30.0), (30.0, 20.0)])
        translated = translate_to_origin(points)
        np.testing.assert_allclose(translated.mean(axis=0), (0.0, 0.0), atol=1e-12)


class TestNormalize(unittest.TestCase):
    """Tests for the complete normalization pipeline."""

    def test_output_shape_and_placement(self):
        normalized = normalize(circle_points(radius=40.0))
        self.assertIsInstance(normalized, NormalizedPath)
        self.assertEqual(len(normalized), 64)
        array = normalized.as_array()
        np.testing.assert_allclose(array.mean(axis=0), (0.0, 0.0), atol=1e-9)
        width, height = array.max(axis=0) - array.min(axis=0)
        self.assertAlmostEqual(width, 250.0, places=6)
        self.assertAlmostEqual(height, 250.0, places=6)

    def test_custom_point_count_and_square(self):
        normalized = normalize(triangle_points(), num_points=32, square_size=100.0)
        self.assertEqual(len(normalized), 32)
        width, height = np.ptp(normalized.as_array(), axis=0)
        self.assertAlmostEqual(width, 100.0, places=6)
        self.assertAlmostEqual(height, 100.0, places=6)

    def test_accepts_path2d_and_point_sequences(self):
        points = triangle_points()
        from_path = normalize(Path2D(points))
        from_list = normalize(points)
        from_dicts = normalize([{'x': x, 'y': y, 't': i} for i, (x, y) in enumerate(points)])
        self.assertEqual(from_path, from_list)
        self.assertEqual(from_path, from_dicts)

    def test_deterministic(self):
        points = circle_points(radius=3.0)
        first = normalize(points)
        second = normalize(points)
        self.assertTrue(np.array_equal(first.as_array(), second.as_array()))

    def test_translation_invariant(self):
        points = triangle_points()
        moved = translate(points, 1000.0, -450.0)
        np.testing.assert_allclose(normalize(points).as_array(),
                                   normalize(moved).as_array(), atol=1e-6)

    def test_scale_invariant(self):
        points = triangle_points()
        for factor in (0.01, 3.0, 250.0):
            with self.subTest(factor=factor):
                distance = path_distance(normalize(points), normalize(scale(points, factor)))
                self.assertLess(distance, 1e-6)

    def test_rotation_invariant(self):
        points = circle_points(radius=50.0)
        for degrees in (-30.0, 10.0, 40.0):
            with self.subTest(degrees=degrees):
                rotated = normalize(rotate(points, math.radians(degrees)))
                distance = optimal_distance(normalize(points), rotated,
                                            angle_precision=math.radians(0.01))
                self.assertLess(distance, 0.1)

    def test_straight_line_stays_straight(self):
        normalized = normalize(line_points()).as_array()
        self.assertTrue(np.all(np.isfinite(normalized)))
        self.assertLess(np.abs(normalized[:, 1]).max(), 1e-9)
        self.assertAlmostEqual(normalized[0, 0], 125.0, places=6)
        self.assertAlmostEqual(normalized[-1, 0], -125.0, places=6)

    def test_single_point_is_degenerate(self):
        with self.assertRaises(DegeneratePathError):
            normalize([(5.0, 5.0)])


if __name__ == '__main__':
    unittest.main()
