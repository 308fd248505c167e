"""
Ordinal indexing and grid coordinates for slot positions.
"""

# Standard Library
import dataclasses

# local repo modules
import warehouse_slot_map as wsm
import warehouse_slot_map.config
import warehouse_slot_map.diagnostics
import warehouse_slot_map.positions


LayoutConfig = wsm.config.LayoutConfig
Diagnostics = wsm.diagnostics.Diagnostics
Position = wsm.positions.Position


#============================================
def numeric_key(value: str) -> tuple[int, str]:
	"""
	Sort key ordering digit strings by value, so "09" precedes "10".

	Args:
		value: Digit string.

	Returns:
		Tuple of (int value, original string).
	"""
	return (int(value, 10), value)


#============================================
def build_aisle_index(positions: list[Position]) -> dict[str, int]:
	"""
	Assign each distinct aisle a 0-based ordinal.

	Args:
		positions: Positions to index.

	Returns:
		Mapping of aisle to aisle index.
	"""
	aisles = sorted({position.aisle for position in positions}, key=numeric_key)
	return {aisle: index for index, aisle in enumerate(aisles)}


#============================================
def build_slot_index(positions: list[Position]) -> dict[str, dict[str, int]]:
	"""
	Assign each distinct slot within its aisle a 0-based ordinal.

	Args:
		positions: Positions to index.

	Returns:
		Mapping of aisle to a mapping of slot to slot index.
	"""
	slots_by_aisle: dict[str, set[str]] = {}
	for position in positions:
		slots_by_aisle.setdefault(position.aisle, set()).add(position.slot)
	slot_index: dict[str, dict[str, int]] = {}
	for aisle, slots in slots_by_aisle.items():
		ordered = sorted(slots, key=numeric_key)
		slot_index[aisle] = {slot: index for index, slot in enumerate(ordered)}
	return slot_index


#============================================
def compute_coordinates(
	aisle_index: int,
	slot_index: int,
	config: LayoutConfig,
) -> tuple[int, int]:
	"""
	Compute the top-left pixel of a box from its ordinals.

	Args:
		aisle_index: Aisle ordinal.
		slot_index: Slot ordinal within the aisle.
		config: Layout configuration.

	Returns:
		Tuple of (x, y).
	"""
	if config.aisle_axis == "x":
		column, row = aisle_index, slot_index
	else:
		column, row = slot_index, aisle_index
	x = config.margin + column * (config.box_width + config.gap_x)
	y = config.margin + row * (config.box_height + config.gap_y)
	return (x, y)


#============================================
def assign_layout(
	positions: list[Position],
	config: LayoutConfig | None = None,
	diagnostics: Diagnostics | None = None,
) -> list[Position]:
	"""
	Fill in indices, coordinates and box size for every position.

	The result depends only on the set of aisle and slot identifiers, never
	on input order, and is sorted by (aisle_index, slot_index).

	Args:
		positions: Positions from build_positions or a previous layout.
		config: Layout configuration.
		diagnostics: Optional stage counter.

	Returns:
		New list of laid out Position entries.
	"""
	if config is None:
		config = LayoutConfig()
	wsm.config.validate_layout_config(config)
	diagnostics = wsm.diagnostics.ensure_diagnostics(diagnostics)

	aisle_index = build_aisle_index(positions)
	slot_index = build_slot_index(positions)

	laid_out: list[Position] = []
	for position in positions:
		a_index = aisle_index[position.aisle]
		s_index = slot_index[position.aisle][position.slot]
		x, y = compute_coordinates(a_index, s_index, config)
		laid_out.append(
			dataclasses.replace(
				position,
				aisle_index=a_index,
				slot_index=s_index,
				x=x,
				y=y,
				width=config.box_width,
				height=config.box_height,
			)
		)
	laid_out.sort(key=lambda position: (position.aisle_index, position.slot_index))
	diagnostics.record("positions_laid_out", len(laid_out))
	return laid_out


#============================================
def compute_canvas_size(
	positions: list[Position],
	config: LayoutConfig | None = None,
) -> tuple[int, int]:
	"""
	Compute the smallest canvas that holds every box plus the outer margin.

	Args:
		positions: Laid out positions.
		config: Layout configuration.

	Returns:
		Tuple of (width, height).
	"""
	if config is None:
		config = LayoutConfig()
	width = 2 * config.margin
	height = 2 * config.margin
	for position in positions:
		width = max(width, position.x + position.width + config.margin)
		height = max(height, position.y + position.height + config.margin)
	return (width, height)


#============================================
def aisle_header_offsets(
	positions: list[Position],
	config: LayoutConfig | None = None,
) -> list[tuple[str, int]]:
	"""
	List each aisle with the offset of its column (or row) along the aisle axis.

	Args:
		positions: Laid out positions.
		config: Layout configuration.

	Returns:
		List of (aisle, offset) ordered by aisle index.
	"""
	if config is None:
		config = LayoutConfig()
	offsets: dict[str, tuple[int, int]] = {}
	for position in positions:
		if position.aisle in offsets:
			continue
		offset = position.x if config.aisle_axis == "x" else position.y
		offsets[position.aisle] = (position.aisle_index, offset)
	ordered = sorted(offsets.items(), key=lambda item: item[1][0])
	return [(aisle, offset) for aisle, (_index, offset) in ordered]
