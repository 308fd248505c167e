"""
Shared configuration and constants.
"""

import dataclasses


CODE_LENGTH = 7
AISLE_DIGITS = 2
SLOT_DIGITS = 3
LEVEL_DIGITS = 2
HEADER_LEVEL = "00"

DEFAULT_BOX_WIDTH = 50
DEFAULT_BOX_HEIGHT = 35
DEFAULT_GAP_X = 12
DEFAULT_GAP_Y = 10
DEFAULT_MARGIN = 5
DEFAULT_AISLE_AXIS = "x"
AISLE_AXES = ("x", "y")

SOURCE_FORMATS = ("auto", "codes", "materials")
DEFAULT_SOURCE_FORMAT = "auto"
MATERIAL_SEPARATOR = "|"
FETCH_TIMEOUT = 15

DEFAULT_FONT_REGULAR = "Helvetica"
DEFAULT_FONT_BOLD = "Helvetica-Bold"
LABEL_TEXT_SIZE = 7.0
FLOOR_TEXT_SIZE = 5.5
HEADER_TEXT_SIZE = 8.0
HEADER_BAND = 18.0
BOX_LINE_WIDTH = 0.6
BOX_FILL_COLOR = "#FFFFFF"
BOX_STROKE_COLOR = "#6B7280"
HIGHLIGHT_FILL_COLOR = "#FDE68A"
HIGHLIGHT_STROKE_COLOR = "#D97706"
TEXT_COLOR = "#1F2937"

# 0300103 and 0300104 collapse into one box 03-001 with floors [3, 4]
SAMPLE_CODES = (
	"0300103",
	"0300104",
	"0501702",
	"0501703",
	"0700305",
)


@dataclasses.dataclass
class ParseOptions:
	include_height_zero: bool = False
	source_format: str = DEFAULT_SOURCE_FORMAT


@dataclasses.dataclass
class LayoutConfig:
	box_width: int = DEFAULT_BOX_WIDTH
	box_height: int = DEFAULT_BOX_HEIGHT
	gap_x: int = DEFAULT_GAP_X
	gap_y: int = DEFAULT_GAP_Y
	margin: int = DEFAULT_MARGIN
	aisle_axis: str = DEFAULT_AISLE_AXIS


@dataclasses.dataclass
class RenderConfig:
	header_band: float = HEADER_BAND
	draw_floor_counts: bool = True
	label_text_size: float = LABEL_TEXT_SIZE
	floor_text_size: float = FLOOR_TEXT_SIZE
	header_text_size: float = HEADER_TEXT_SIZE


@dataclasses.dataclass
class ComparisonSummary:
	added: list[str]
	removed: list[str]
	changed: list[str]
	unchanged: list[str]


#============================================
def validate_layout_config(config: LayoutConfig) -> None:
	"""
	Reject layout configs with an unknown axis, a box size below 1, or a
	negative gap or margin. Gaps and margin may be 0.

	Args:
		config: Layout configuration.
	"""
	for name in ("box_width", "box_height", "gap_x", "gap_y", "margin"):
		value = getattr(config, name)
		if value < 0:
			raise ValueError(f"{name} must be >= 0, got {value}")
	if config.box_width == 0 or config.box_height == 0:
		raise ValueError("box_width and box_height must be positive")
	if config.aisle_axis not in AISLE_AXES:
		raise ValueError(f"aisle_axis must be one of {AISLE_AXES}, got {config.aisle_axis!r}")
