"""
Pytest configuration for local imports and shared fixtures.
"""

# Standard Library
import os
import sys

# PIP3 modules
import pytest

#============================================


def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()

import warehouse_slot_map.config


CODES_TEXT = "\n".join([
	"Ubicacion",
	"\"0300100\",",
	"\"0300103\",",
	"\"0300104\",",
	"\"0501702\",",
	"0501703",
	"Z12",
	"0201D03",
	"",
	"\"0700305\",",
])

MATERIALS_TEXT = "\r\n".join([
	"\"Ubicacion\", \"Materiales\"",
	"\"0300103\", \"A248755000|A248015001\"",
	"\"0300104\", \"\"",
	"\"0300103\", \"A100000001\"",
	"\"0300100\", \"A999999999\"",
	"\"1000201\", \"B1|B2\"",
])


#============================================
@pytest.fixture
def codes_text() -> str:
	"""
	Code-only export with header rows and garbage lines.
	"""
	return CODES_TEXT


#============================================
@pytest.fixture
def materials_text() -> str:
	"""
	Two-column materials export with a repeated code and an empty column.
	"""
	return MATERIALS_TEXT


#============================================
@pytest.fixture
def layout_config() -> warehouse_slot_map.config.LayoutConfig:
	"""
	Default layout configuration.
	"""
	return warehouse_slot_map.config.LayoutConfig()
