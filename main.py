#!/usr/bin/env python3
"""
Stroke Recognizer - Main Entry Point
Opens the gesture trainer window.
"""

import logging
import sys

from stroke_recognizer.utils.logger import setup_logging


def main():
    """Main entry point for the gesture trainer."""
    setup_logging(logging.DEBUG if '--debug' in sys.argv else logging.INFO)

    from stroke_recognizer.training.app import main as run_trainer
    run_trainer()


if __name__ == "__main__":
    main()
