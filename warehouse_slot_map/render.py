"""
PDF map rendering and JSON export of laid out positions.
"""

# Standard Library
import dataclasses
import json
import pathlib

# PIP3 modules
import reportlab.pdfgen.canvas

# local repo modules
import warehouse_slot_map as wsm
import warehouse_slot_map.config
import warehouse_slot_map.diagnostics
import warehouse_slot_map.layout
import warehouse_slot_map.positions


LayoutConfig = wsm.config.LayoutConfig
RenderConfig = wsm.config.RenderConfig
ComparisonSummary = wsm.config.ComparisonSummary
Diagnostics = wsm.diagnostics.Diagnostics
Position = wsm.positions.Position

DEFAULT_FONT_REGULAR = wsm.config.DEFAULT_FONT_REGULAR
DEFAULT_FONT_BOLD = wsm.config.DEFAULT_FONT_BOLD
BOX_LINE_WIDTH = wsm.config.BOX_LINE_WIDTH
BOX_FILL_COLOR = wsm.config.BOX_FILL_COLOR
BOX_STROKE_COLOR = wsm.config.BOX_STROKE_COLOR
HIGHLIGHT_FILL_COLOR = wsm.config.HIGHLIGHT_FILL_COLOR
HIGHLIGHT_STROKE_COLOR = wsm.config.HIGHLIGHT_STROKE_COLOR
TEXT_COLOR = wsm.config.TEXT_COLOR


#============================================
def parse_hex_color(value: str) -> tuple[float, float, float]:
	"""
	Parse a hex color string into RGB floats.

	Args:
		value: Color string like "#AABBCC".

	Returns:
		Tuple of (r, g, b) in 0.0-1.0 range.
	"""
	if not value or not value.startswith("#") or len(value) != 7:
		return (0.0, 0.0, 0.0)
	red = int(value[1:3], 16) / 255.0
	green = int(value[3:5], 16) / 255.0
	blue = int(value[5:7], 16) / 255.0
	return (red, green, blue)


#============================================
def compute_page_size(
	positions: list[Position],
	layout_config: LayoutConfig,
	render_config: RenderConfig,
) -> tuple[float, float, float]:
	"""
	Compute the page size and the height of the box area.

	The aisle header band sits above the boxes when aisles run along x,
	and left of them when aisles run along y.

	Args:
		positions: Laid out positions.
		layout_config: Layout configuration.
		render_config: Render configuration.

	Returns:
		Tuple of (page_width, page_height, canvas_height).
	"""
	canvas_width, canvas_height = wsm.layout.compute_canvas_size(positions, layout_config)
	if layout_config.aisle_axis == "x":
		return (float(canvas_width), canvas_height + render_config.header_band, float(canvas_height))
	return (canvas_width + render_config.header_band, float(canvas_height), float(canvas_height))


#============================================
def floor_summary(position: Position) -> str:
	"""
	Short text listing the levels of a position, like "L3 L4".
	"""
	return " ".join(f"L{floor.level}" for floor in position.floors)


#============================================
def draw_aisle_headers(
	pdf: reportlab.pdfgen.canvas.Canvas,
	positions: list[Position],
	layout_config: LayoutConfig,
	render_config: RenderConfig,
	canvas_height: float,
) -> None:
	"""
	Draw the aisle number strip.

	Args:
		pdf: ReportLab canvas.
		positions: Laid out positions.
		layout_config: Layout configuration.
		render_config: Render configuration.
		canvas_height: Height of the box area.
	"""
	band = render_config.header_band
	size = render_config.header_text_size
	pdf.setFont(DEFAULT_FONT_BOLD, size)
	pdf.setFillColorRGB(*parse_hex_color(TEXT_COLOR))
	for aisle, offset in wsm.layout.aisle_header_offsets(positions, layout_config):
		if layout_config.aisle_axis == "x":
			text_x = offset + layout_config.box_width / 2.0
			text_y = canvas_height + band / 2.0 - size / 3.0
		else:
			text_x = band / 2.0
			text_y = canvas_height - offset - layout_config.box_height / 2.0 - size / 3.0
		pdf.drawCentredString(text_x, text_y, aisle)


#============================================
def draw_position(
	pdf: reportlab.pdfgen.canvas.Canvas,
	position: Position,
	x_offset: float,
	canvas_height: float,
	render_config: RenderConfig,
) -> None:
	"""
	Draw one slot box with its label.

	Args:
		pdf: ReportLab canvas.
		position: Laid out position.
		x_offset: Horizontal offset of the box area.
		canvas_height: Height of the box area.
		render_config: Render configuration.
	"""
	# screen y grows downward, PDF y grows upward
	box_x = x_offset + position.x
	box_y = canvas_height - position.y - position.height
	if position.highlighted:
		fill = HIGHLIGHT_FILL_COLOR
		stroke = HIGHLIGHT_STROKE_COLOR
	else:
		fill = BOX_FILL_COLOR
		stroke = BOX_STROKE_COLOR
	pdf.setLineWidth(BOX_LINE_WIDTH)
	pdf.setFillColorRGB(*parse_hex_color(fill))
	pdf.setStrokeColorRGB(*parse_hex_color(stroke))
	pdf.rect(box_x, box_y, position.width, position.height, stroke=1, fill=1)

	center_x = box_x + position.width / 2.0
	center_y = box_y + position.height / 2.0
	pdf.setFillColorRGB(*parse_hex_color(TEXT_COLOR))
	pdf.setFont(DEFAULT_FONT_BOLD, render_config.label_text_size)
	if not render_config.draw_floor_counts:
		pdf.drawCentredString(center_x, center_y - render_config.label_text_size / 3.0, position.label)
		return
	pdf.drawCentredString(center_x, center_y + 1.0, position.label)
	pdf.setFont(DEFAULT_FONT_REGULAR, render_config.floor_text_size)
	pdf.drawCentredString(
		center_x,
		center_y - render_config.floor_text_size - 1.0,
		f"{len(position.floors)} fl",
	)


#============================================
def render_positions_to_pdf(
	positions: list[Position],
	output_path: pathlib.Path,
	layout_config: LayoutConfig | None = None,
	render_config: RenderConfig | None = None,
) -> int:
	"""
	Render a single page map of the positions.

	Args:
		positions: Laid out positions.
		output_path: Output PDF path.
		layout_config: Layout configuration used to lay out the positions.
		render_config: Render configuration.

	Returns:
		Number of boxes drawn.
	"""
	if layout_config is None:
		layout_config = LayoutConfig()
	if render_config is None:
		render_config = RenderConfig()
	page_width, page_height, canvas_height = compute_page_size(positions, layout_config, render_config)
	x_offset = 0.0
	if layout_config.aisle_axis == "y":
		x_offset = render_config.header_band

	pdf = reportlab.pdfgen.canvas.Canvas(str(output_path), pagesize=(page_width, page_height))
	pdf.setTitle("Warehouse slot map")
	draw_aisle_headers(pdf, positions, layout_config, render_config, canvas_height)
	for position in positions:
		draw_position(pdf, position, x_offset, canvas_height, render_config)
	pdf.showPage()
	pdf.save()
	return len(positions)


#============================================
def position_to_dict(position: Position) -> dict:
	"""
	Convert a Position into plain JSON data.

	Args:
		position: Position entry.

	Returns:
		Dict with lists in place of tuples.
	"""
	data = dataclasses.asdict(position)
	data["floors"] = [
		{"level": floor.level, "materials": list(floor.materials)}
		for floor in position.floors
	]
	return data


#============================================
def write_positions_json(
	output_path: pathlib.Path,
	positions: list[Position],
	layout_config: LayoutConfig | None = None,
	diagnostics: Diagnostics | None = None,
	summary: ComparisonSummary | None = None,
) -> None:
	"""
	Write positions, layout settings and stage counts to a JSON file.

	Args:
		output_path: Output path.
		positions: Laid out positions.
		layout_config: Layout configuration.
		diagnostics: Optional stage counter.
		summary: Optional comparison summary.
	"""
	if layout_config is None:
		layout_config = LayoutConfig()
	data = {
		"positions": [position_to_dict(position) for position in positions],
		"position_count": len(positions),
		"highlighted_count": sum(1 for position in positions if position.highlighted),
		"layout": dataclasses.asdict(layout_config),
		"canvas": list(wsm.layout.compute_canvas_size(positions, layout_config)),
	}
	if diagnostics is not None:
		data["diagnostics"] = diagnostics.as_dict()
	if summary is not None:
		data["comparison"] = dataclasses.asdict(summary)
	with output_path.open("w", encoding="utf-8") as handle:
		json.dump(data, handle, indent=2, sort_keys=True)
