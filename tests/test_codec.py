import pytest

from textpack import codec
from textpack.storage import DATA_FILE_NAME, CodingType


@pytest.mark.parametrize("kind", [1, 2])
@pytest.mark.parametrize("text", ["abracadabra", "Hello Hello", "mississippi river"])
def test_round_trip(tmp_path, kind, text):
    path = codec.encode(text, tmp_path, kind)
    assert codec.decode(path) == text


@pytest.mark.parametrize("kind", [CodingType.HUFFMAN, CodingType.LZ77])
def test_round_trip_non_ascii(tmp_path, kind):
    text = "na\u00efve caf\u00e9 \u2615"
    path = codec.encode(text, str(tmp_path), kind)
    assert codec.decode(str(path)) == text


def test_encode_returns_data_file_path(tmp_path):
    assert codec.encode("abab", tmp_path, 2) == tmp_path / DATA_FILE_NAME


@pytest.mark.parametrize("kind, tag", [(1, b"1"), (2, b"2")])
def test_file_starts_with_type_tag(tmp_path, kind, tag):
    path = codec.encode("hello world", tmp_path, kind)
    assert path.read_bytes()[:1] == tag


def test_lz77_empty_text(tmp_path):
    path = codec.encode("", tmp_path, 2)
    assert codec.decode(path) == ""


def test_huffman_empty_text_raises(tmp_path):
    with pytest.raises(ValueError):
        codec.encode("", tmp_path, 1)


def test_unknown_kind(tmp_path):
    with pytest.raises(ValueError):
        codec.encode("abc", tmp_path, 3)


def test_decode_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        codec.decode(tmp_path / "nothing.bin")


def test_decode_unknown_type(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"9")
    with pytest.raises(ValueError):
        codec.decode(path)


def test_decode_empty_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"")
    with pytest.raises(ValueError):
        codec.decode(path)


def test_decode_truncated_file(tmp_path):
    path = codec.encode("abracadabra", tmp_path, 1)
    path.write_bytes(path.read_bytes()[:-3])
    with pytest.raises(ValueError):
        codec.decode(path)