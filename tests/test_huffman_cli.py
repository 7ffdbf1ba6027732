import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

from huffman_cli import main


def test_compress_then_decompress(tmp_path, capsys):
	src = tmp_path / "notes.txt"
	packed = tmp_path / "notes.hf"
	restored = tmp_path / "notes.out"
	data = b"to be or not to be, that is the question\n" * 30
	src.write_bytes(data)

	assert main(["compress", str(src), str(packed)]) == 0
	out = capsys.readouterr().out
	assert "compress from notes.txt to notes.hf" in out
	assert f"file: {len(data) * 8} bits to " in out
	assert f"read {len(data) * 8} bits" in out
	assert "bits saved = " in out

	assert main(["-v", "decompress", str(packed), str(restored)]) == 0
	assert restored.read_bytes() == data


def test_decompress_rejects_plain_file(tmp_path, capsys):
	src = tmp_path / "plain.txt"
	dst = tmp_path / "plain.out"
	src.write_bytes(b"not compressed at all")

	assert main(["decompress", str(src), str(dst)]) == 1
	assert "decompress failed" in capsys.readouterr().err
	assert not dst.exists()


def test_missing_input(tmp_path, capsys):
	assert main(["compress", str(tmp_path / "nope"), str(tmp_path / "out")]) == 1
	assert "input file not found" in capsys.readouterr().err
