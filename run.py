#!/usr/bin/env python3
"""
CUI Render Launcher
====================
Run this script to start the demo.
"""

from cui_render.main import main

if __name__ == "__main__":
    main()
