"""
Constants and default configuration values for gridlayout.
"""

import os

# Host style defaults (what an untouched immediate-mode UI style uses)
DEFAULT_ITEM_SPACING = (8.0, 3.0)		# (x, y) gap between items
DEFAULT_CLIP_RECT_MARGIN = 3.0			# how far clipped content may spill

# Default bounds for headless hosts and the demo
DEFAULT_HOST_WIDTH = 300.0
DEFAULT_HOST_HEIGHT = 400.0

# Settings file for the demo and any host that persists its style
SETTINGS_FILE = os.environ.get('GRIDLAYOUT_SETTINGS', 'gridlayout.json')
