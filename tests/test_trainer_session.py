"""Unit tests for TrainerSession and MatchLogger."""

import os
import shutil
import tempfile
import unittest

from stroke_recognizer.training.session import RecordMode, TrainerSession
from stroke_recognizer.utils.logger import MatchLogger

from shapes import circle_points, line_points, translate, zigzag_points


class TestTrainerSession(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.template_file = os.path.join(self.temp_dir, 'data.gestures')
        self.session = TrainerSession(template_file=self.template_file)

    def tearDown(self):
        self.session.match_logger.close()
        shutil.rmtree(self.temp_dir)

    def _draw(self, mode, points):
        self.session.begin(mode)
        for x, y in points:
            self.session.add_point(x, y)
        return self.session.finish()

    def test_begin_messages(self):
        self.assertEqual(self.session.begin(RecordMode.TEMPLATE), "Recording template")
        self.assertTrue(self.session.is_recording)
        self.assertEqual(self.session.begin(RecordMode.ATTEMPT), "Recording")

    def test_finish_without_recording(self):
        self.assertEqual(self.session.finish(), "")
        self.assertEqual(self.session.last_path, [])

    def test_templates_are_named_by_index(self):
        self.assertEqual(self._draw(RecordMode.TEMPLATE, circle_points(radius=100.0)),
                         "Done recording template 0")
        self.assertEqual(self._draw(RecordMode.TEMPLATE, zigzag_points()),
                         "Done recording template 1")
        self.assertEqual(self.session.recognizer.templates.names(), ['0', '1'])
        self.assertIs(self.session.last_mode, RecordMode.TEMPLATE)

    def test_degenerate_template_rejected(self):
        message = self._draw(RecordMode.TEMPLATE, [(5.0, 5.0)])
        self.assertTrue(message.startswith("Template rejected:"))
        self.assertEqual(len(self.session.recognizer.templates), 0)

    def test_attempt_matches(self):
        self._draw(RecordMode.TEMPLATE, circle_points(radius=100.0))
        self._draw(RecordMode.TEMPLATE, zigzag_points())
        message = self._draw(RecordMode.ATTEMPT, translate(circle_points(radius=120.0), 400.0, 300.0))
        self.assertTrue(message.startswith("Matched 0 with score"), message)
        self.assertTrue(self.session.last_matched)
        self.assertIs(self.session.last_mode, RecordMode.ATTEMPT)
        self.assertEqual(len(self.session.last_path), 64)

    def test_attempt_below_threshold(self):
        self._draw(RecordMode.TEMPLATE, zigzag_points())
        self.session.recognizer.set_threshold(0.95)
        message = self._draw(RecordMode.ATTEMPT, line_points())
        self.assertTrue(message.startswith("Matched 0 but with score"), message)
        self.assertFalse(self.session.last_matched)

    def test_attempt_without_templates(self):
        message = self._draw(RecordMode.ATTEMPT, circle_points(radius=100.0))
        self.assertTrue(message.startswith("Failed to match:"))
        self.assertFalse(self.session.last_matched)

    def test_attempt_too_short(self):
        self._draw(RecordMode.TEMPLATE, circle_points(radius=100.0))
        message = self._draw(RecordMode.ATTEMPT, [(0.0, 0.0), (3.0, 4.0)])
        self.assertIn("below the minimum", message)

    def test_save_and_load(self):
        self._draw(RecordMode.TEMPLATE, circle_points(radius=100.0))
        self._draw(RecordMode.TEMPLATE, zigzag_points())
        self.assertEqual(self.session.save(), "Saved 2 templates")

        other = TrainerSession(template_file=self.template_file)
        self.assertEqual(other.load(), "Loaded 2 templates")
        self.assertEqual(other.recognizer.templates.names(), ['0', '1'])

    def test_load_missing_file(self):
        with self.assertLogs('stroke_recognizer.training.session', level='ERROR'):
            self.assertEqual(self.session.load(), "Error loading templates")

    def test_load_malformed_file(self):
        with open(self.template_file, 'w', encoding='utf-8') as f:
            f.write("not json")
        with self.assertLogs('stroke_recognizer.training.session', level='ERROR'):
            self.assertEqual(self.session.load(), "Error loading templates")

    def test_save_to_missing_directory(self):
        session = TrainerSession(template_file=os.path.join(self.temp_dir, 'nope', 'data.gestures'))
        with self.assertLogs('stroke_recognizer.training.session', level='ERROR'):
            self.assertEqual(session.save(), "Error saving templates")


class TestMatchLogger(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_mirrors_events_to_debug_file(self):
        debug_file = os.path.join(self.temp_dir, 'debug.log')
        match_logger = MatchLogger(debug_file)
        match_logger.log_match('circle', 0.93)
        match_logger.log_match('zigzag', 0.41, threshold=0.8)
        match_logger.log_template('0', 57)
        match_logger.close()

        with open(debug_file, encoding='utf-8') as f:
            content = f.read()
        self.assertIn("MATCHED circle with score 0.930", content)
        self.assertIn("MATCHED zigzag but with score 0.410", content)
        self.assertIn("TEMPLATE 0 recorded from 57 point(s)", content)

    def test_unwritable_debug_file(self):
        missing = os.path.join(self.temp_dir, 'nope', 'debug.log')
        with self.assertLogs('stroke_recognizer.utils.logger', level='WARNING'):
            match_logger = MatchLogger(missing)
        self.assertIsNone(match_logger.debug_file)


if __name__ == '__main__':
    unittest.main()
