"""
Comparison of two snapshots of the same warehouse.
"""

# Standard Library
import dataclasses

# local repo modules
import warehouse_slot_map as wsm
import warehouse_slot_map.config
import warehouse_slot_map.diagnostics
import warehouse_slot_map.layout
import warehouse_slot_map.positions


LayoutConfig = wsm.config.LayoutConfig
ComparisonSummary = wsm.config.ComparisonSummary
Diagnostics = wsm.diagnostics.Diagnostics
Floor = wsm.positions.Floor
Position = wsm.positions.Position


#============================================
def floors_differ(floors_a: tuple[Floor, ...], floors_b: tuple[Floor, ...]) -> bool:
	"""
	Check whether two floor sequences hold different contents.

	Material order is significant: [A, B] differs from [B, A].

	Args:
		floors_a: Floors of the first position.
		floors_b: Floors of the second position.

	Returns:
		True if the level sets or any per-level materials differ.
	"""
	contents_a = {floor.level: tuple(floor.materials) for floor in floors_a}
	contents_b = {floor.level: tuple(floor.materials) for floor in floors_b}
	return contents_a != contents_b


#============================================
def compare_snapshots(
	baseline: list[Position],
	target: list[Position],
	show_target: bool = False,
	config: LayoutConfig | None = None,
	diagnostics: Diagnostics | None = None,
) -> list[Position]:
	"""
	Merge two snapshots into one position set with highlight flags.

	Positions only in the baseline are kept so removed slots stay visible.
	Layout is recomputed over the union of both snapshots, so coordinates
	do not move when show_target is toggled.

	Args:
		baseline: Positions of the earlier snapshot.
		target: Positions of the later snapshot.
		show_target: Show target floors instead of baseline floors.
		config: Layout configuration.
		diagnostics: Optional stage counter.

	Returns:
		Laid out positions, each with highlighted set.
	"""
	diagnostics = wsm.diagnostics.ensure_diagnostics(diagnostics)
	baseline_by_id = wsm.positions.index_by_id(baseline)
	target_ids: set[str] = set()

	merged: list[Position] = []
	for position in target:
		target_ids.add(position.id)
		previous = baseline_by_id.get(position.id)
		if previous is None:
			merged.append(dataclasses.replace(position, highlighted=True))
			continue
		floors = position.floors if show_target else previous.floors
		highlighted = floors_differ(previous.floors, position.floors)
		merged.append(dataclasses.replace(position, floors=floors, highlighted=highlighted))

	for position in baseline:
		if position.id in target_ids:
			continue
		merged.append(dataclasses.replace(position, highlighted=True))

	highlighted_count = sum(1 for position in merged if position.highlighted)
	diagnostics.record("positions_highlighted", highlighted_count)
	return wsm.layout.assign_layout(merged, config, diagnostics)


#============================================
def summarize_changes(baseline: list[Position], target: list[Position]) -> ComparisonSummary:
	"""
	Classify every id as added, removed, changed or unchanged.

	Args:
		baseline: Positions of the earlier snapshot.
		target: Positions of the later snapshot.

	Returns:
		ComparisonSummary with sorted id lists.
	"""
	baseline_by_id = wsm.positions.index_by_id(baseline)
	target_by_id = wsm.positions.index_by_id(target)
	added = sorted(set(target_by_id) - set(baseline_by_id))
	removed = sorted(set(baseline_by_id) - set(target_by_id))
	changed = []
	unchanged = []
	for position_id in sorted(set(baseline_by_id) & set(target_by_id)):
		if floors_differ(baseline_by_id[position_id].floors, target_by_id[position_id].floors):
			changed.append(position_id)
		else:
			unchanged.append(position_id)
	return ComparisonSummary(added=added, removed=removed, changed=changed, unchanged=unchanged)
