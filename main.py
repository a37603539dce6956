#!/usr/bin/env python3
"""
Whiteboard - Main Entry Point
Draw rectangles, circles, lines, freehand strokes and labels; closed freehand
strokes are turned into circles or rectangles when they fit well enough.
"""

import argparse
import logging

from whiteboard.config.settings import BoardConfig
from whiteboard.core.controller import BoardController
from whiteboard.core.document import DocumentStore
from whiteboard.gestures.shape_recognizer import RecognitionConfig, ShapeRecognizer
from whiteboard.utils.logger import BoardLogger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Freehand whiteboard with shape recognition")
    parser.add_argument('--storage', default=BoardConfig.STORAGE_FILE,
                        help="JSON file the board is loaded from and saved to")
    parser.add_argument('--touch', action='store_true',
                        help="also read input from a multitouch screen (evdev)")
    parser.add_argument('--circle-threshold', type=float, default=BoardConfig.CIRCLE_ERROR_THRESHOLD)
    parser.add_argument('--rect-threshold', type=float, default=BoardConfig.RECT_ERROR_THRESHOLD)
    parser.add_argument('--width', type=int, default=BoardConfig.WINDOW_WIDTH)
    parser.add_argument('--height', type=int, default=BoardConfig.WINDOW_HEIGHT)
    parser.add_argument('--debug', action='store_true', help="verbose logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the whiteboard."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    from whiteboard.ui.board_app import WhiteboardApp

    store = DocumentStore(args.storage)
    recognizer = ShapeRecognizer(RecognitionConfig(circle_threshold=args.circle_threshold,
                                                   rect_threshold=args.rect_threshold))
    board_logger = BoardLogger(verbose=args.debug)
    controller = BoardController(store.load(), store, recognizer, board_logger)

    touch_input = None
    if args.touch:
        from whiteboard.core.listener import TouchInput
        touch_input = TouchInput((args.width, args.height))
        if not touch_input.start():
            print("❌ No touchscreen found, using mouse input only")
            touch_input = None

    app = WhiteboardApp(controller, (args.width, args.height), touch_input)
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        controller.save()
        app.close()
        board_logger.close()

if __name__ == "__main__":
    main()
