import pytest

import warehouse_slot_map.codes
import warehouse_slot_map.config
import warehouse_slot_map.diagnostics


ParseOptions = warehouse_slot_map.config.ParseOptions


#============================================
def _code_strings(codes: list[warehouse_slot_map.codes.LocationCode]) -> list[str]:
	return [code.code for code in codes]


#============================================
def test_location_code_fields() -> None:
	"""
	Verify the aisle, slot and level split of a seven digit code.
	"""
	code = warehouse_slot_map.codes.LocationCode(code="0300104")
	assert code.aisle == "03"
	assert code.slot == "001"
	assert code.level_field == "04"
	assert code.level == 4
	assert code.materials is None


#============================================
def test_parse_code_line_cleanup() -> None:
	"""
	Quotes, trailing commas and whitespace are stripped before matching.
	"""
	assert warehouse_slot_map.codes.parse_code_line("\"0300104\",").code == "0300104"
	assert warehouse_slot_map.codes.parse_code_line("  0300104 ").code == "0300104"
	assert warehouse_slot_map.codes.parse_code_line("'03 001 04',").code == "0300104"


#============================================
def test_parse_code_line_rejects_malformed() -> None:
	"""
	Letters and other lengths are rejected.
	"""
	for line in ("Z12", "0201D03", "", "030010", "03001045", "PB00101", "\"Ubicacion\","):
		assert warehouse_slot_map.codes.parse_code_line(line) is None


#============================================
def test_split_lines_handles_line_endings() -> None:
	"""
	Unix, Windows and old Mac line endings all split.
	"""
	lines = warehouse_slot_map.codes.split_lines("0300103\r\n0300104\n0300105\r0300106")
	assert lines == ["0300103", "0300104", "0300105", "0300106"]
	assert warehouse_slot_map.codes.split_lines("") == []


#============================================
def test_extract_codes_filters_height_zero(codes_text: str) -> None:
	"""
	Level 00 rows are dropped by default and kept on request.
	"""
	codes = warehouse_slot_map.codes.extract_codes(codes_text)
	assert "0300100" not in _code_strings(codes)
	assert _code_strings(codes) == ["0300103", "0300104", "0501702", "0501703", "0700305"]

	options = ParseOptions(include_height_zero=True)
	codes = warehouse_slot_map.codes.extract_codes(codes_text, options)
	assert _code_strings(codes)[0] == "0300100"
	assert len(codes) == 6


#============================================
def test_extract_codes_records_stage_counts(codes_text: str) -> None:
	"""
	Diagnostics see every filtering stage.
	"""
	diagnostics = warehouse_slot_map.diagnostics.Diagnostics()
	warehouse_slot_map.codes.extract_codes(codes_text, None, diagnostics)
	assert diagnostics.get("lines_total") == 10
	assert diagnostics.get("codes_matched") == 6
	assert diagnostics.get("codes_after_height_filter") == 5


#============================================
def test_verbose_diagnostics_use_sink(codes_text: str) -> None:
	"""
	Verbose diagnostics write through the injected sink.
	"""
	messages: list[str] = []
	diagnostics = warehouse_slot_map.diagnostics.Diagnostics(verbose=True, sink=messages.append)
	warehouse_slot_map.codes.extract_codes(codes_text, None, diagnostics)
	assert messages == [
		"lines_total: 10",
		"codes_matched: 6",
		"codes_after_height_filter: 5",
	]


#============================================
def test_parse_material_line() -> None:
	"""
	The two-column format yields a code plus its material list.
	"""
	code = warehouse_slot_map.codes.parse_material_line("\"0300104\", \"A248755000|A248015001\"")
	assert code.code == "0300104"
	assert code.materials == ("A248755000", "A248015001")

	empty = warehouse_slot_map.codes.parse_material_line("\"0300104\", \"\"")
	assert empty.materials == ()

	assert warehouse_slot_map.codes.parse_material_line("\"030010\", \"A1\"") is None
	assert warehouse_slot_map.codes.parse_material_line("0300104, A1") is None


#============================================
def test_split_materials_drops_blanks() -> None:
	assert warehouse_slot_map.codes.split_materials("A1||A2| ") == ("A1", "A2")


#============================================
def test_detect_format(codes_text: str, materials_text: str) -> None:
	"""
	Auto detection picks the materials parser only for two-column exports.
	"""
	assert warehouse_slot_map.codes.detect_format(codes_text) == "codes"
	assert warehouse_slot_map.codes.detect_format(materials_text) == "materials"


#============================================
def test_extract_codes_materials_format(materials_text: str) -> None:
	"""
	Materials exports keep per-line material lists and drop level 00.
	"""
	codes = warehouse_slot_map.codes.extract_codes(materials_text)
	assert _code_strings(codes) == ["0300103", "0300104", "0300103", "1000201"]
	assert codes[1].materials == ()
	assert codes[3].materials == ("B1", "B2")


#============================================
def test_forced_format_ignores_other_layout(materials_text: str) -> None:
	"""
	Forcing the code-only parser on a materials export only keeps rows
	whose materials column is empty, since cleanup strips the quotes.
	"""
	options = ParseOptions(source_format="codes")
	codes = warehouse_slot_map.codes.extract_codes(materials_text, options)
	assert _code_strings(codes) == ["0300104"]
	assert codes[0].materials is None


#============================================
def test_unknown_format_raises() -> None:
	options = ParseOptions(source_format="xml")
	with pytest.raises(ValueError):
		warehouse_slot_map.codes.extract_codes("0300104", options)


#============================================
def test_child_diagnostics_share_counts() -> None:
	"""
	Child scopes prefix their stages and write into the parent counts.
	"""
	messages: list[str] = []
	parent = warehouse_slot_map.diagnostics.Diagnostics(verbose=True, sink=messages.append)
	child = parent.child("baseline")
	child.record("codes_matched", 4)
	parent.record("positions_laid_out", 2)
	assert parent.as_dict() == {"baseline.codes_matched": 4, "positions_laid_out": 2}
	assert child.get("baseline.codes_matched") == 4
	assert messages == ["baseline.codes_matched: 4", "positions_laid_out: 2"]
