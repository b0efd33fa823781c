"""
Settings management for gridlayout hosts.

The only persisted settings are the host style values the grid reads
(item spacing and clip rect margin), stored as JSON.
"""

import json

from .constants import DEFAULT_CLIP_RECT_MARGIN, DEFAULT_ITEM_SPACING, SETTINGS_FILE
from .geometry import Vec2
from .host import HostStyle

# -------

saved_settings_data = None

def style_to_settings(style: HostStyle) -> dict:
	return {
		"item_spacing_x": style.item_spacing[0],
		"item_spacing_y": style.item_spacing[1],
		"clip_rect_margin": style.clip_rect_margin,
	}

def settings_to_style(settings: dict) -> HostStyle:
	"""Build a HostStyle from a settings dict, using defaults for missing keys."""
	return HostStyle(
		item_spacing=Vec2(
			float(settings.get("item_spacing_x", DEFAULT_ITEM_SPACING[0])),
			float(settings.get("item_spacing_y", DEFAULT_ITEM_SPACING[1])),
		),
		clip_rect_margin=float(settings.get("clip_rect_margin", DEFAULT_CLIP_RECT_MARGIN)),
	)

def save_host_style(style: HostStyle, settings_file=SETTINGS_FILE):
	"""Save the host style to the settings file, if it changed since the last save."""
	global saved_settings_data

	settings = style_to_settings(style)
	if saved_settings_data != settings:
		print(f"Saving host style: {settings}")
		with open(settings_file, "wt") as f:
			json.dump(settings, f)
		saved_settings_data = settings

def load_host_style(settings_file=SETTINGS_FILE) -> HostStyle:
	"""Load the host style from the settings file, or the default style if there is none."""
	global saved_settings_data
	try:
		with open(settings_file, "rt") as f:
			saved_settings_data = json.load(f)
	except (FileNotFoundError, json.JSONDecodeError):
		saved_settings_data = None
		return HostStyle()
	if not isinstance(saved_settings_data, dict):
		saved_settings_data = None
		return HostStyle()
	return settings_to_style(saved_settings_data)
