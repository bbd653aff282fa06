#!/usr/bin/env python3
"""
Hold-to-Record - Main Entry Point
Drives the record button drag gesture from a touchscreen.
"""

import argparse
import logging
import time
from hold_to_record.core.listener import TouchListener

def main():
    """Main entry point for the record gesture listener."""
    parser = argparse.ArgumentParser(description="Hold to record, slide up to lock, slide sideways to cancel.")
    parser.add_argument('--density', type=float, default=None, help="screen density (1.0 == 160 dpi)")
    parser.add_argument('--debug-file', default=None, help="write every event to this file")
    parser.add_argument('-v', '--verbose', action='store_true', help="log state transitions")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    listener = TouchListener(density=args.density, debug_file=args.debug_file)

    if not listener.start():
        return

    try:
        while listener.running:
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()

if __name__ == "__main__":
    main()
