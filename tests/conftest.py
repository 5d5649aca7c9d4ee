import struct
import pytest

SECTOR = 0x800

def pack_index(entries):
    return b"".join(struct.pack("<LLL", *e) for e in entries)

@pytest.fixture
def make_archive(tmp_path):
    def _make(entries, blob, name="discimg", tail=b""):
        fse = tmp_path / f"{name}.fse"
        fse.write_bytes(pack_index(entries) + tail)
        (tmp_path / f"{name}.pkg").write_bytes(blob)
        return str(fse)

    return _make
