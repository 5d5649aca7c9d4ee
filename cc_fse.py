from construct import *
import os
import typing

SECTOR_SIZE = 0x800
PKG_EXT = ".pkg"
NEW_PREFIX = "new_"

fse_entry_data = Struct(
    "offset_sector" / Hex(Int32ul),
    "size" / Hex(Int32ul),
    "padding" / Hex(Int32ul),
)

FSE_ENTRY_SIZE = fse_entry_data.sizeof()

class MissingInputError(FileNotFoundError):
    pass

class TruncatedRecordError(StreamError):
    pass

class FseEntry(typing.NamedTuple):
    offset_sector: int = 0
    size: int = 0
    padding: int = 0

    @property
    def is_null(self):
        return self.offset_sector == 0 and self.size == 0 and self.padding == 0

    @property
    def byte_offset(self):
        return self.offset_sector * SECTOR_SIZE

NULL_ENTRY = FseEntry()

def read_entry(stream: typing.BinaryIO):
    """Read one 12 byte record, or None once the stream is exhausted."""
    raw = stream.read(FSE_ENTRY_SIZE)
    if len(raw) <= 0: return None

    try:
        t = fse_entry_data.parse(raw)
    except StreamError as e:
        raise TruncatedRecordError(f"{len(raw)} trailing bytes, expected {FSE_ENTRY_SIZE}") from e

    return FseEntry(int(t.offset_sector), int(t.size), int(t.padding))

def write_entry(stream: typing.BinaryIO, entry: FseEntry):
    fse_entry_data.build_stream(entry._asdict(), stream)

def iter_entries(stream: typing.BinaryIO):
    """
    Yield (ordinal, entry) for every whole record in the index.

    The ordinal counts every record read, null ones included, since it is the
    only thing tying a record to its blob payload and its extracted file name.
    A trailing fragment shorter than a record ends the scan.
    """
    ordinal = 0
    while True:
        try:
            entry = read_entry(stream)
        except TruncatedRecordError:
            break

        if entry is None: break

        yield ordinal, entry
        ordinal += 1

def entry_filename(ordinal: int, ext: str):
    return f"File{ordinal:05d}{ext}"

def entry_pattern(ordinal: int):
    return entry_filename(ordinal, ".*")

class ArchivePair(typing.NamedTuple):
    index_path: str
    blob_path: str

    @classmethod
    def from_index(cls, index_path: str):
        return cls(index_path, os.path.splitext(index_path)[0] + PKG_EXT)

    def repacked(self):
        head, tail = os.path.split(self.index_path)
        name, ext = os.path.splitext(tail)

        return ArchivePair(os.path.join(head, NEW_PREFIX + name + ext), os.path.join(head, NEW_PREFIX + name + PKG_EXT))

    def check(self, need_blob: bool=True):
        if not os.path.isfile(self.index_path):
            raise MissingInputError(f"FSE file not found: {self.index_path}")

        if need_blob and not os.path.isfile(self.blob_path):
            raise MissingInputError(f"PKG file not found: {self.blob_path}")
