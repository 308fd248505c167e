"""
Grouping of location codes into slot positions.
"""

# Standard Library
import dataclasses

# local repo modules
import warehouse_slot_map as wsm
import warehouse_slot_map.codes
import warehouse_slot_map.diagnostics


LocationCode = wsm.codes.LocationCode
Diagnostics = wsm.diagnostics.Diagnostics


@dataclasses.dataclass(frozen=True)
class Floor:
	level: int
	materials: tuple[str, ...] = ()


@dataclasses.dataclass(frozen=True)
class Position:
	id: str
	aisle: str
	slot: str
	floors: tuple[Floor, ...]
	label: str = ""
	aisle_index: int = 0
	slot_index: int = 0
	x: int = 0
	y: int = 0
	width: int = 0
	height: int = 0
	highlighted: bool = False


#============================================
def position_id(aisle: str, slot: str) -> str:
	"""
	Build the "{aisle}-{slot}" identifier, keeping zero padding.

	Args:
		aisle: Two digit aisle string.
		slot: Three digit slot string.

	Returns:
		Position id.
	"""
	return f"{aisle}-{slot}"


#============================================
def group_codes(codes: list[LocationCode]) -> dict[tuple[str, str], dict[int, list[str]]]:
	"""
	Group codes by (aisle, slot) and merge them by level.

	Repeated levels collapse into one entry. When a code carries materials,
	every batch seen for that level is appended in encounter order.

	Args:
		codes: Extracted location codes.

	Returns:
		Mapping of (aisle, slot) to a mapping of level to materials.
	"""
	groups: dict[tuple[str, str], dict[int, list[str]]] = {}
	for code in codes:
		levels = groups.setdefault((code.aisle, code.slot), {})
		materials = levels.setdefault(code.level, [])
		if code.materials:
			materials.extend(code.materials)
	return groups


#============================================
def build_floors(levels: dict[int, list[str]]) -> tuple[Floor, ...]:
	"""
	Turn a level mapping into floors sorted by level.

	Args:
		levels: Mapping of level to materials.

	Returns:
		Tuple of Floor entries.
	"""
	floors = []
	for level in sorted(levels):
		floors.append(Floor(level=level, materials=tuple(levels[level])))
	return tuple(floors)


#============================================
def build_positions(
	codes: list[LocationCode],
	diagnostics: Diagnostics | None = None,
) -> list[Position]:
	"""
	Build one Position per (aisle, slot) group.

	Coordinates are left at zero; see layout.assign_layout.

	Args:
		codes: Extracted location codes.
		diagnostics: Optional stage counter.

	Returns:
		List of Position entries in group encounter order.
	"""
	diagnostics = wsm.diagnostics.ensure_diagnostics(diagnostics)
	groups = group_codes(codes)
	diagnostics.record("groups_formed", len(groups))

	positions: list[Position] = []
	for (aisle, slot), levels in groups.items():
		floors = build_floors(levels)
		if not floors:
			continue
		key = position_id(aisle, slot)
		positions.append(
			Position(
				id=key,
				aisle=aisle,
				slot=slot,
				floors=floors,
				label=key,
			)
		)
	diagnostics.record("positions_built", len(positions))
	return positions


#============================================
def index_by_id(positions: list[Position]) -> dict[str, Position]:
	"""
	Map position ids to positions.
	"""
	return {position.id: position for position in positions}
