"""
CLI entry points for the warehouse slot map.
"""

# Standard Library
import argparse
import pathlib
import time

# local repo modules
import warehouse_slot_map as wsm
import warehouse_slot_map.compare
import warehouse_slot_map.config
import warehouse_slot_map.diagnostics
import warehouse_slot_map.loader
import warehouse_slot_map.positions
import warehouse_slot_map.render


ParseOptions = wsm.config.ParseOptions
LayoutConfig = wsm.config.LayoutConfig
RenderConfig = wsm.config.RenderConfig
Diagnostics = wsm.diagnostics.Diagnostics
Position = wsm.positions.Position

DEFAULT_BOX_WIDTH = wsm.config.DEFAULT_BOX_WIDTH
DEFAULT_BOX_HEIGHT = wsm.config.DEFAULT_BOX_HEIGHT
DEFAULT_GAP_X = wsm.config.DEFAULT_GAP_X
DEFAULT_GAP_Y = wsm.config.DEFAULT_GAP_Y
DEFAULT_MARGIN = wsm.config.DEFAULT_MARGIN
AISLE_AXES = wsm.config.AISLE_AXES
SOURCE_FORMATS = wsm.config.SOURCE_FORMATS


#============================================
def build_parse_options(args: argparse.Namespace) -> ParseOptions:
	return ParseOptions(
		include_height_zero=args.include_height_zero,
		source_format=args.source_format,
	)


#============================================
def build_layout_config(args: argparse.Namespace) -> LayoutConfig:
	"""
	Build layout config from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		LayoutConfig.
	"""
	config = LayoutConfig(
		box_width=args.box_width,
		box_height=args.box_height,
		gap_x=args.gap_x,
		gap_y=args.gap_y,
		margin=args.margin,
		aisle_axis=args.aisle_axis,
	)
	wsm.config.validate_layout_config(config)
	return config


#============================================
def build_render_config(args: argparse.Namespace) -> RenderConfig:
	return RenderConfig(draw_floor_counts=args.draw_floor_counts)


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Optional argument list, defaults to sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Lay out warehouse location codes as a slot map.")
	parser.add_argument("source", nargs="?", default=None, help="Location export file or URL (baseline when comparing).")

	input_group = parser.add_argument_group("Input")
	input_group.add_argument("-t", "--target", dest="target", default=None, help="Second snapshot to compare against the source.")
	input_group.add_argument("-f", "--format", dest="source_format", choices=SOURCE_FORMATS, help="Source format.")
	input_group.add_argument("-z", "--include-height-zero", dest="include_height_zero", action="store_true", help="Keep level 00 codes.")
	input_group.add_argument("-Z", "--no-include-height-zero", dest="include_height_zero", action="store_false", help="Drop level 00 codes.")
	input_group.add_argument("-s", "--show-target", dest="show_target", action="store_true", help="Show target floors when comparing.")
	input_group.add_argument("-S", "--no-show-target", dest="show_target", action="store_false", help="Show baseline floors when comparing.")

	layout_group = parser.add_argument_group("Layout")
	layout_group.add_argument("-a", "--aisle-axis", dest="aisle_axis", choices=AISLE_AXES, help="Screen axis that aisles run along.")
	layout_group.add_argument("--box-width", dest="box_width", type=int, default=DEFAULT_BOX_WIDTH, help="Box width in pixels.")
	layout_group.add_argument("--box-height", dest="box_height", type=int, default=DEFAULT_BOX_HEIGHT, help="Box height in pixels.")
	layout_group.add_argument("--gap-x", dest="gap_x", type=int, default=DEFAULT_GAP_X, help="Horizontal gap in pixels.")
	layout_group.add_argument("--gap-y", dest="gap_y", type=int, default=DEFAULT_GAP_Y, help="Vertical gap in pixels.")
	layout_group.add_argument("--margin", dest="margin", type=int, default=DEFAULT_MARGIN, help="Outer margin in pixels.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", default=None, help="Output PDF map path.")
	output_group.add_argument("-j", "--json", dest="json_path", default=None, help="Output JSON export path.")
	output_group.add_argument("-i", "--inspect", dest="inspect_ids", action="append", default=[], help="Print the floors of a slot id like 03-001.")
	output_group.add_argument("-c", "--floor-counts", dest="draw_floor_counts", action="store_true", help="Draw floor counts in boxes.")
	output_group.add_argument("-C", "--no-floor-counts", dest="draw_floor_counts", action="store_false", help="Draw only slot labels.")
	output_group.add_argument("-v", "--verbose", dest="verbose", action="store_true", help="Print stage counts.")

	parser.set_defaults(
		source_format="auto",
		include_height_zero=False,
		show_target=False,
		aisle_axis="x",
		draw_floor_counts=True,
		verbose=False,
	)

	args = parser.parse_args(argv)
	if args.target is not None and args.source is None:
		parser.error("--target needs a source snapshot to compare against")
	try:
		build_layout_config(args)
	except ValueError as error:
		parser.error(str(error))
	return args


#============================================
def describe_position(position: Position) -> list[str]:
	"""
	Format the floors of a position for the terminal.

	Args:
		position: Position entry.

	Returns:
		Lines of text.
	"""
	lines = [f"Slot {position.label} (aisle {position.aisle}, slot {position.slot})"]
	if position.highlighted:
		lines.append("  changed between snapshots")
	for floor in position.floors:
		if floor.materials:
			contents = ", ".join(floor.materials)
		else:
			contents = "no materials recorded"
		lines.append(f"  level {floor.level}: {contents}")
	return lines


#============================================
def load_positions(
	args: argparse.Namespace,
	options: ParseOptions,
	layout_config: LayoutConfig,
	diagnostics: Diagnostics,
) -> tuple[list[Position], wsm.config.ComparisonSummary | None]:
	"""
	Load positions for the run, with sample fallback.

	Args:
		args: Parsed argparse namespace.
		options: Parse options.
		layout_config: Layout configuration.
		diagnostics: Stage counter.

	Returns:
		Tuple of (positions, comparison summary or None).
	"""
	if args.target is None:
		positions, used_sample = wsm.loader.load_or_sample(args.source, options, layout_config, diagnostics)
		if used_sample:
			print("Loaded sample dataset")
		return (positions, None)

	try:
		baseline, target = wsm.loader.load_snapshots(
			args.source,
			args.target,
			options,
			layout_config,
			diagnostics,
		)
	except wsm.loader.SourceUnavailableError as error:
		print(f"Comparison unavailable: {error}")
		print("Using sample data")
		return (wsm.loader.sample_positions(layout_config), None)
	summary = wsm.compare.summarize_changes(baseline, target)
	positions = wsm.compare.compare_snapshots(
		baseline,
		target,
		args.show_target,
		layout_config,
		diagnostics,
	)
	if not positions:
		print("No positions parsed from either snapshot, using sample data")
		return (wsm.loader.sample_positions(layout_config), None)
	return (positions, summary)


#============================================
def run_pipeline(args: argparse.Namespace) -> None:
	"""
	Run the full pipeline from source text to map outputs.

	Args:
		args: Parsed argparse namespace.
	"""
	print("Warehouse slot map pipeline")
	print(f"Source: {args.source}")
	if args.target:
		print(f"Target: {args.target}")
		print(f"Show target: {args.show_target}")
	print(f"Format: {args.source_format}")
	print(f"Include height zero: {args.include_height_zero}")
	print(f"Aisle axis: {args.aisle_axis}")

	options = build_parse_options(args)
	layout_config = build_layout_config(args)
	diagnostics = Diagnostics(verbose=args.verbose)

	start_time = time.perf_counter()
	positions, summary = load_positions(args, options, layout_config, diagnostics)
	load_end = time.perf_counter()
	print(f"Positions: {len(positions)}")
	if summary is not None:
		print(
			f"Added: {len(summary.added)} Removed: {len(summary.removed)} "
			f"Changed: {len(summary.changed)} Unchanged: {len(summary.unchanged)}"
		)

	by_id = wsm.positions.index_by_id(positions)
	for position_id in args.inspect_ids:
		position = by_id.get(position_id)
		if position is None:
			print(f"Slot {position_id} not found")
			continue
		for line in describe_position(position):
			print(line)

	if args.output_path:
		output_path = pathlib.Path(args.output_path)
		render_config = build_render_config(args)
		drawn = wsm.render.render_positions_to_pdf(positions, output_path, layout_config, render_config)
		print(f"Boxes drawn: {drawn}")
		print(f"Map written: {output_path}")

	if args.json_path:
		json_path = pathlib.Path(args.json_path)
		wsm.render.write_positions_json(json_path, positions, layout_config, diagnostics, summary)
		print(f"JSON written: {json_path}")

	total_time = time.perf_counter() - start_time
	print(
		"Timing: load={:.2f}s total={:.2f}s".format(
			load_end - start_time,
			total_time,
		)
	)


#============================================
def main(argv: list[str] | None = None) -> None:
	"""
	Main entry point.
	"""
	args = parse_args(argv)
	run_pipeline(args)
