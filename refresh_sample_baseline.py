#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Refresh the sample dataset baseline for tests.
"""

import json
import pathlib
import subprocess

import warehouse_slot_map.loader
import warehouse_slot_map.render


#============================================
def get_repo_root() -> pathlib.Path:
	"""
	Get the repository root via git, or the script directory outside git.

	Returns:
		Repository root path.
	"""
	result = subprocess.run(
		["git", "rev-parse", "--show-toplevel"],
		capture_output=True,
		text=True,
		check=False,
	)
	root = result.stdout.strip()
	if result.returncode != 0 or not root:
		return pathlib.Path(__file__).resolve().parent
	return pathlib.Path(root)


#============================================
def write_json(path: pathlib.Path, payload: list) -> None:
	"""
	Write a JSON payload to disk.

	Args:
		path: Output path.
		payload: JSON payload.
	"""
	text = json.dumps(payload, indent=2, sort_keys=True)
	path.write_text(text + "\n", encoding="utf-8")


#============================================
def main() -> None:
	"""
	Rebuild tests/fixtures/sample_positions.json from the sample codes.
	"""
	repo_root = get_repo_root()
	positions = warehouse_slot_map.loader.sample_positions()
	payload = [warehouse_slot_map.render.position_to_dict(position) for position in positions]
	fixtures_dir = repo_root / "tests" / "fixtures"
	fixtures_dir.mkdir(parents=True, exist_ok=True)
	write_json(fixtures_dir / "sample_positions.json", payload)
	print(f"Updated sample baseline with {len(payload)} positions.")


if __name__ == "__main__":
	main()
