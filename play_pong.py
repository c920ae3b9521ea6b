#!/usr/bin/env python3
"""
Main script to launch Touch Pong with PyGame graphical interface
"""

import importlib.util
import sys

if __name__ == "__main__":
    missing = [name for name in ("pygame", "numpy", "pydantic") if importlib.util.find_spec(name) is None]
    if missing:
        print("Checking dependencies:")
        for name in missing:
            print(f"✗ {name} is not installed - pip install {name}")
        sys.exit(1)

    from touch_pong.gui.game_app import main

    print("=== TOUCH PONG ===")
    print()
    print("CONTROLS:")
    print("  Drag your paddle (left) with the mouse, or use UP/DOWN")
    print("  Click or SPACE: start / resume")
    print("  P: Pause")
    print("  N: New game")
    print("  ESC: Quit")
    print()

    sys.exit(main())
