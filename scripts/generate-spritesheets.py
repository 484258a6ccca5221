#!/usr/bin/env python3
"""
Generate Font Awesome spritesheets for the game UI.

Reads node_modules/@fortawesome/fontawesome-free/svgs/{brands,regular,solid}/*.svg
and writes dist/<style>/sheet.png + dist/<style>/sheet.lua.

Usage: python3 scripts/generate-spritesheets.py [--only solid] [--out dist]
Needs the iconsheet package installed (pip install -e .).
"""
import sys

from iconsheet.build import main

if __name__ == "__main__":
    sys.exit(main())
