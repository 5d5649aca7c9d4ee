import glob
import os
from cc_fse import ArchivePair, FseEntry, NULL_ENTRY, SECTOR_SIZE, MissingInputError, iter_entries, write_entry, entry_pattern

def find_counterparts(in_dir: str, ordinal: int):
    """Extracted files for an ordinal, whatever extension they were given."""
    found = glob.glob(os.path.join(glob.escape(in_dir), entry_pattern(ordinal)))
    return sorted(f for f in found if os.path.isfile(f))

def align_stream(stream, alignment: int=SECTOR_SIZE):
    pos = stream.tell()
    if pos % alignment != 0:
        stream.write(b"\0" * (alignment - (pos % alignment)))

    return stream.tell()

def repack(fse_path: str, in_dir: str):
    """
    Rebuild an FSE/PKG pair from a folder of extracted files.

    The original index is only a template: its record count, null slots and
    padding fields are carried over, while offsets and sizes come from the
    files found in in_dir. Output goes to new_<name> next to the original.
    """
    pair = ArchivePair.from_index(fse_path)
    pair.check(need_blob=False)

    if not os.path.isdir(in_dir):
        raise MissingInputError(f"input folder not found: {in_dir}")

    new_pair = pair.repacked()
    print(f"Creating {os.path.basename(new_pair.blob_path)} based on {os.path.basename(fse_path)}...")

    with open(pair.index_path, "rb") as old_fse, open(new_pair.index_path, "wb") as new_fse, open(new_pair.blob_path, "wb") as new_pkg:
        for index, old_entry in iter_entries(old_fse):
            if old_entry.is_null:
                write_entry(new_fse, NULL_ENTRY)
                continue

            files = find_counterparts(in_dir, index)
            if not files:
                print(f"[WARNING] File {entry_pattern(index)} not found in folder. Creating an empty entry instead.")
                write_entry(new_fse, NULL_ENTRY)
                continue

            with open(files[0], "rb") as f:
                data = f.read()

            pos = align_stream(new_pkg)
            new_pkg.write(data)
            write_entry(new_fse, FseEntry(pos // SECTOR_SIZE, len(data), old_entry.padding))

            print(f"Added: {os.path.basename(files[0])}")

    print("\nRepackaged successfully!")
    print(f"Created: {os.path.basename(new_pair.index_path)}")
    print(f"Created: {os.path.basename(new_pair.blob_path)}")

    return new_pair
