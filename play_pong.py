#!/usr/bin/env python3
"""
Main script to launch Neon Pong with PyGame graphical interface
"""

import sys

from neon_pong.gui.game_app import main

if __name__ == "__main__":
    print("=== NEON PONG ===")
    print("You (left) against the computer (right)")
    print()
    print("CONTROLS:")
    print("  Up/Down or W/S: Move paddle")
    print("  Mouse/touch in the left third: Drag paddle")
    print("  SPACE: Start / Pause")
    print("  R: Restart")
    print("  ESC: Quit")
    print()

    sys.exit(main(sys.argv[1:]))
