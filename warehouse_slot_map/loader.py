"""
Loader entry points: read a source, parse it, lay it out.
"""

# Standard Library
import pathlib

# PIP3 modules
import requests

# local repo modules
import warehouse_slot_map as wsm
import warehouse_slot_map.codes
import warehouse_slot_map.compare
import warehouse_slot_map.config
import warehouse_slot_map.diagnostics
import warehouse_slot_map.layout
import warehouse_slot_map.positions


ParseOptions = wsm.config.ParseOptions
LayoutConfig = wsm.config.LayoutConfig
Diagnostics = wsm.diagnostics.Diagnostics
Position = wsm.positions.Position

FETCH_TIMEOUT = wsm.config.FETCH_TIMEOUT
SAMPLE_CODES = wsm.config.SAMPLE_CODES


class SourceUnavailableError(RuntimeError):
	"""
	Raised when a source file or URL cannot be read.
	"""

	def __init__(self, source_ref: str, reason: str) -> None:
		super().__init__(f"Could not load {source_ref}: {reason}")
		self.source_ref = source_ref
		self.reason = reason


#============================================
def is_url(source_ref: str) -> bool:
	return source_ref.startswith(("http://", "https://"))


#============================================
def fetch_url(url: str, timeout: float = FETCH_TIMEOUT) -> str:
	"""
	Fetch a text resource over HTTP.

	Args:
		url: Resource URL.
		timeout: Request timeout in seconds.

	Returns:
		Response body text.
	"""
	try:
		response = requests.get(url, timeout=timeout)
	except requests.RequestException as error:
		raise SourceUnavailableError(url, str(error)) from error
	if response.status_code != 200:
		raise SourceUnavailableError(url, f"{response.status_code} {response.reason}")
	return response.text


#============================================
def read_source(source_ref: str | pathlib.Path) -> str:
	"""
	Read raw export text from a file path or an http(s) URL.

	Args:
		source_ref: Path or URL.

	Returns:
		Raw text.
	"""
	source_ref = str(source_ref)
	if is_url(source_ref):
		return fetch_url(source_ref)
	path = pathlib.Path(source_ref)
	if not path.is_file():
		raise SourceUnavailableError(source_ref, "file not found")
	# undecodable bytes only spoil their own line, which then fails to match
	try:
		return path.read_text(encoding="utf-8-sig", errors="replace")
	except OSError as error:
		raise SourceUnavailableError(source_ref, str(error)) from error


#============================================
def parse_text(
	text: str,
	options: ParseOptions | None = None,
	config: LayoutConfig | None = None,
	diagnostics: Diagnostics | None = None,
) -> list[Position]:
	"""
	Run extraction, grouping and layout on raw text.

	Args:
		text: Raw export text.
		options: Parse options.
		config: Layout configuration.
		diagnostics: Optional stage counter.

	Returns:
		Laid out positions.
	"""
	diagnostics = wsm.diagnostics.ensure_diagnostics(diagnostics)
	codes = wsm.codes.extract_codes(text, options, diagnostics)
	positions = wsm.positions.build_positions(codes, diagnostics)
	return wsm.layout.assign_layout(positions, config, diagnostics)


#============================================
def load_from_source(
	source_ref: str | pathlib.Path,
	options: ParseOptions | None = None,
	config: LayoutConfig | None = None,
	diagnostics: Diagnostics | None = None,
) -> list[Position]:
	"""
	Read a source and return its laid out positions.

	Args:
		source_ref: Path or URL.
		options: Parse options.
		config: Layout configuration.
		diagnostics: Optional stage counter.

	Returns:
		Laid out positions.
	"""
	text = read_source(source_ref)
	return parse_text(text, options, config, diagnostics)


#============================================
def load_snapshots(
	baseline_ref: str | pathlib.Path,
	target_ref: str | pathlib.Path,
	options: ParseOptions | None = None,
	config: LayoutConfig | None = None,
	diagnostics: Diagnostics | None = None,
) -> tuple[list[Position], list[Position]]:
	"""
	Read and parse both snapshots of a comparison independently.

	Args:
		baseline_ref: Path or URL of the earlier snapshot.
		target_ref: Path or URL of the later snapshot.
		options: Parse options.
		config: Layout configuration.
		diagnostics: Optional stage counter; stages are recorded as
			"baseline.<stage>" and "target.<stage>".

	Returns:
		Tuple of (baseline positions, target positions).
	"""
	diagnostics = wsm.diagnostics.ensure_diagnostics(diagnostics)
	baseline = load_from_source(baseline_ref, options, config, diagnostics.child("baseline"))
	target = load_from_source(target_ref, options, config, diagnostics.child("target"))
	return (baseline, target)


#============================================
def load_with_comparison(
	baseline_ref: str | pathlib.Path,
	target_ref: str | pathlib.Path,
	show_target: bool = False,
	options: ParseOptions | None = None,
	config: LayoutConfig | None = None,
	diagnostics: Diagnostics | None = None,
) -> list[Position]:
	"""
	Read two snapshots and merge them with highlight flags.

	Args:
		baseline_ref: Path or URL of the earlier snapshot.
		target_ref: Path or URL of the later snapshot.
		show_target: Show target floors instead of baseline floors.
		options: Parse options.
		config: Layout configuration.
		diagnostics: Optional stage counter.

	Returns:
		Merged, laid out positions.
	"""
	diagnostics = wsm.diagnostics.ensure_diagnostics(diagnostics)
	baseline, target = load_snapshots(baseline_ref, target_ref, options, config, diagnostics)
	return wsm.compare.compare_snapshots(baseline, target, show_target, config, diagnostics)


#============================================
def sample_positions(config: LayoutConfig | None = None) -> list[Position]:
	"""
	Build the built-in sample dataset.

	Args:
		config: Layout configuration.

	Returns:
		Laid out sample positions.
	"""
	return parse_text("\n".join(SAMPLE_CODES), ParseOptions(source_format="codes"), config)


#============================================
def load_or_sample(
	source_ref: str | pathlib.Path | None,
	options: ParseOptions | None = None,
	config: LayoutConfig | None = None,
	diagnostics: Diagnostics | None = None,
) -> tuple[list[Position], bool]:
	"""
	Load a source, falling back to the sample dataset.

	A missing source, a failed read or an empty result all fall back, so
	the caller always has positions to show.

	Args:
		source_ref: Path or URL, or None to use the sample directly.
		options: Parse options.
		config: Layout configuration.
		diagnostics: Optional stage counter.

	Returns:
		Tuple of (positions, used_sample).
	"""
	if source_ref is None:
		print("No source given, using sample data")
		return (sample_positions(config), True)
	try:
		positions = load_from_source(source_ref, options, config, diagnostics)
	except SourceUnavailableError as error:
		print(f"Source unavailable: {error}")
		print("Using sample data")
		return (sample_positions(config), True)
	if not positions:
		print(f"No positions parsed from {source_ref}, using sample data")
		return (sample_positions(config), True)
	return (positions, False)
