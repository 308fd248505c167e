"""
Stage counters for the parsing pipeline.
"""

# Standard Library
import dataclasses
from typing import Callable


@dataclasses.dataclass
class Diagnostics:
	"""
	Collect per-stage counts (lines seen, codes matched, groups formed).

	Counts never influence pipeline output. When verbose is set each record
	is also written through sink, which defaults to print.
	"""
	verbose: bool = False
	sink: Callable[[str], None] | None = None
	counts: dict[str, int] = dataclasses.field(default_factory=dict)
	prefix: str = ""

	#============================================
	def record(self, stage: str, count: int) -> None:
		"""
		Store the latest count for a stage.

		Args:
			stage: Stage name.
			count: Item count at that stage.
		"""
		stage = f"{self.prefix}{stage}"
		self.counts[stage] = count
		if not self.verbose:
			return
		writer = self.sink if self.sink is not None else print
		writer(f"{stage}: {count}")

	#============================================
	def child(self, name: str) -> "Diagnostics":
		"""
		Return a Diagnostics that records into the same counts as "{name}.{stage}".

		Args:
			name: Scope name, like "baseline".

		Returns:
			Diagnostics sharing counts, verbosity and sink.
		"""
		return Diagnostics(
			verbose=self.verbose,
			sink=self.sink,
			counts=self.counts,
			prefix=f"{self.prefix}{name}.",
		)

	#============================================
	def get(self, stage: str, default: int | None = None) -> int | None:
		"""
		Return the count recorded for a stage.
		"""
		return self.counts.get(stage, default)

	#============================================
	def as_dict(self) -> dict[str, int]:
		return dict(self.counts)


#============================================
def ensure_diagnostics(diagnostics: Diagnostics | None) -> Diagnostics:
	"""
	Return the given diagnostics or a fresh quiet instance.

	Args:
		diagnostics: Optional Diagnostics.

	Returns:
		Diagnostics instance.
	"""
	if diagnostics is None:
		return Diagnostics()
	return diagnostics
