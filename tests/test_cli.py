import json
import pathlib

import pytest

import warehouse_slot_map.cli


#============================================
def test_parse_args_defaults() -> None:
	args = warehouse_slot_map.cli.parse_args([])
	assert args.source is None
	assert args.target is None
	assert args.source_format == "auto"
	assert not args.include_height_zero
	assert args.aisle_axis == "x"
	config = warehouse_slot_map.cli.build_layout_config(args)
	assert config == warehouse_slot_map.cli.LayoutConfig()


#============================================
def test_run_without_source_uses_sample(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
	"""
	With no source the sample dataset is written out.
	"""
	json_path = tmp_path / "out.json"
	warehouse_slot_map.cli.main(["-j", str(json_path), "-i", "03-001", "-i", "99-999"])
	output = capsys.readouterr().out
	assert "Loaded sample dataset" in output
	assert "Positions: 3" in output
	assert "  level 3: no materials recorded" in output
	assert "Slot 99-999 not found" in output
	data = json.loads(json_path.read_text(encoding="utf-8"))
	assert data["position_count"] == 3


#============================================
def test_run_comparison(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
	"""
	Comparison mode prints a change summary and renders a map.
	"""
	baseline = tmp_path / "before.txt"
	target = tmp_path / "after.txt"
	baseline.write_text("\"0300101\", \"A\"\n\"0300201\", \"C\"\n", encoding="utf-8")
	target.write_text("\"0300101\", \"B\"\n\"0300301\", \"D\"\n", encoding="utf-8")
	output_pdf = tmp_path / "map.pdf"
	warehouse_slot_map.cli.main([
		str(baseline),
		"-t", str(target),
		"-s",
		"-o", str(output_pdf),
		"-i", "03-001",
		"-v",
	])
	output = capsys.readouterr().out
	assert "Added: 1 Removed: 1 Changed: 1 Unchanged: 0" in output
	assert "  changed between snapshots" in output
	assert "  level 1: B" in output
	assert "positions_highlighted: 3" in output
	assert "Boxes drawn: 3" in output
	assert output_pdf.exists()


#============================================
def test_run_with_missing_target_falls_back(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
	baseline = tmp_path / "before.txt"
	baseline.write_text("0300101\n", encoding="utf-8")
	warehouse_slot_map.cli.main([str(baseline), "-t", str(tmp_path / "after.txt")])
	output = capsys.readouterr().out
	assert "Comparison unavailable" in output
	assert "Positions: 3" in output


#============================================
def test_run_comparison_of_empty_snapshots_falls_back(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
	"""
	Two readable snapshots without a single valid code show the sample.
	"""
	baseline = tmp_path / "before.txt"
	target = tmp_path / "after.txt"
	baseline.write_text("Z12\n", encoding="utf-8")
	target.write_text("garbage\n0201D03\n", encoding="utf-8")
	json_path = tmp_path / "out.json"
	warehouse_slot_map.cli.main([str(baseline), "-t", str(target), "-j", str(json_path)])
	output = capsys.readouterr().out
	assert "No positions parsed from either snapshot" in output
	assert "Positions: 3" in output
	assert "Added:" not in output
	data = json.loads(json_path.read_text(encoding="utf-8"))
	assert data["position_count"] == 3
	assert "comparison" not in data


#============================================
def test_run_comparison_verbose_counts_each_snapshot(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
	baseline = tmp_path / "before.txt"
	target = tmp_path / "after.txt"
	baseline.write_text("0300101\n0300102\n", encoding="utf-8")
	target.write_text("0300101\n", encoding="utf-8")
	warehouse_slot_map.cli.main([str(baseline), "-t", str(target), "-v"])
	output = capsys.readouterr().out
	assert "baseline.codes_matched: 2" in output
	assert "target.codes_matched: 1" in output
	assert "positions_highlighted: 1" in output


#============================================
def test_target_without_source_is_rejected(capsys: pytest.CaptureFixture) -> None:
	"""
	A target alone has nothing to compare against.
	"""
	with pytest.raises(SystemExit) as excinfo:
		warehouse_slot_map.cli.parse_args(["-t", "after.txt"])
	assert excinfo.value.code == 2
	assert "--target needs a source" in capsys.readouterr().err


#============================================
def test_bad_layout_size_is_a_usage_error(capsys: pytest.CaptureFixture) -> None:
	with pytest.raises(SystemExit) as excinfo:
		warehouse_slot_map.cli.parse_args(["--box-width", "0"])
	assert excinfo.value.code == 2
	assert "box_width and box_height must be positive" in capsys.readouterr().err
	with pytest.raises(SystemExit):
		warehouse_slot_map.cli.parse_args(["--gap-x", "-1"])
	args = warehouse_slot_map.cli.parse_args(["--gap-x", "0", "--margin", "0"])
	assert warehouse_slot_map.cli.build_layout_config(args).gap_x == 0
