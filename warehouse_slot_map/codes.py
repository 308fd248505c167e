"""
Location code extraction and normalization.
"""

# Standard Library
import dataclasses
import re

# local repo modules
import warehouse_slot_map as wsm
import warehouse_slot_map.config
import warehouse_slot_map.diagnostics


ParseOptions = wsm.config.ParseOptions
Diagnostics = wsm.diagnostics.Diagnostics

AISLE_DIGITS = wsm.config.AISLE_DIGITS
SLOT_DIGITS = wsm.config.SLOT_DIGITS
HEADER_LEVEL = wsm.config.HEADER_LEVEL
MATERIAL_SEPARATOR = wsm.config.MATERIAL_SEPARATOR
SOURCE_FORMATS = wsm.config.SOURCE_FORMATS

CODE_PATTERN = re.compile(r"[0-9]{7}")
CLEANUP_PATTERN = re.compile(r"[\"',\s]")
MATERIAL_LINE_PATTERN = re.compile(r"\"([0-9]{7})\",\s*\"([^\"]*)\"")


@dataclasses.dataclass(frozen=True)
class LocationCode:
	code: str
	materials: tuple[str, ...] | None = None

	@property
	def aisle(self) -> str:
		return self.code[:AISLE_DIGITS]

	@property
	def slot(self) -> str:
		return self.code[AISLE_DIGITS:AISLE_DIGITS + SLOT_DIGITS]

	@property
	def level_field(self) -> str:
		return self.code[AISLE_DIGITS + SLOT_DIGITS:]

	@property
	def level(self) -> int:
		return int(self.level_field, 10)


#============================================
def split_lines(text: str) -> list[str]:
	"""
	Split raw text on any line ending and trim each line.

	Args:
		text: Raw export text.

	Returns:
		Trimmed lines, empty lines included.
	"""
	if not text:
		return []
	return [line.strip() for line in text.splitlines()]


#============================================
def clean_code_line(line: str) -> str:
	"""
	Strip quotes, commas and whitespace from a code-only line.

	Args:
		line: Input line like '"0300104",'.

	Returns:
		Cleaned text.
	"""
	return CLEANUP_PATTERN.sub("", line)


#============================================
def parse_code_line(line: str) -> LocationCode | None:
	"""
	Parse one line of the code-only format.

	Args:
		line: Raw line.

	Returns:
		LocationCode or None when the line is not exactly seven digits.
	"""
	cleaned = clean_code_line(line)
	if not CODE_PATTERN.fullmatch(cleaned):
		return None
	return LocationCode(code=cleaned)


#============================================
def split_materials(value: str) -> tuple[str, ...]:
	"""
	Split a pipe-delimited materials column, dropping blank entries.

	Args:
		value: Column text like "A248755000|A248015001".

	Returns:
		Tuple of material identifiers.
	"""
	materials = []
	for token in value.split(MATERIAL_SEPARATOR):
		token = token.strip()
		if token:
			materials.append(token)
	return tuple(materials)


#============================================
def parse_material_line(line: str) -> LocationCode | None:
	"""
	Parse one line of the two-column materials format.

	Args:
		line: Raw line like '"0300104", "A248755000|A248015001"'.

	Returns:
		LocationCode with materials, or None when the line does not match.
	"""
	match = MATERIAL_LINE_PATTERN.search(line)
	if match is None:
		return None
	return LocationCode(code=match.group(1), materials=split_materials(match.group(2)))


#============================================
def detect_format(text: str) -> str:
	"""
	Guess the source format of an export.

	Args:
		text: Raw export text.

	Returns:
		"materials" if any line has the two-column layout, else "codes".
	"""
	for line in split_lines(text):
		if MATERIAL_LINE_PATTERN.search(line):
			return "materials"
	return "codes"


#============================================
def resolve_format(text: str, source_format: str) -> str:
	"""
	Resolve "auto" into a concrete format name.

	Args:
		text: Raw export text.
		source_format: One of SOURCE_FORMATS.

	Returns:
		"codes" or "materials".
	"""
	if source_format not in SOURCE_FORMATS:
		raise ValueError(f"source_format must be one of {SOURCE_FORMATS}, got {source_format!r}")
	if source_format == "auto":
		return detect_format(text)
	return source_format


#============================================
def extract_codes(
	text: str,
	options: ParseOptions | None = None,
	diagnostics: Diagnostics | None = None,
) -> list[LocationCode]:
	"""
	Extract well-formed location codes from raw export text.

	Lines that do not parse are skipped; export dumps routinely carry
	header rows and non-location entries such as "Z12" or "0201D03".

	Args:
		text: Raw export text.
		options: Parse options.
		diagnostics: Optional stage counter.

	Returns:
		LocationCode entries in encounter order.
	"""
	if options is None:
		options = ParseOptions()
	diagnostics = wsm.diagnostics.ensure_diagnostics(diagnostics)

	source_format = resolve_format(text, options.source_format)
	parse_line = parse_material_line if source_format == "materials" else parse_code_line

	lines = split_lines(text)
	diagnostics.record("lines_total", len(lines))

	codes: list[LocationCode] = []
	for line in lines:
		if not line:
			continue
		code = parse_line(line)
		if code is not None:
			codes.append(code)
	diagnostics.record("codes_matched", len(codes))

	if not options.include_height_zero:
		codes = [code for code in codes if code.level_field != HEADER_LEVEL]
	diagnostics.record("codes_after_height_filter", len(codes))
	return codes
