import os
import hexdump
from cc_fse import ArchivePair, iter_entries, entry_filename
from cc_magic import detect_extension, GENERIC_EXT

DUMP_UNKNOWN = False

def extract(fse_path: str, out_dir: str):
    pair = ArchivePair.from_index(fse_path)
    pair.check()

    os.makedirs(out_dir, exist_ok=True)
    print(f"Reading {os.path.basename(fse_path)}...")

    written = []
    pkg_size = os.path.getsize(pair.blob_path)

    with open(pair.index_path, "rb") as fse_io, open(pair.blob_path, "rb") as pkg_io:
        for index, entry in iter_entries(fse_io):
            if entry.is_null: continue

            if entry.byte_offset + entry.size > pkg_size:
                print(f"[WARNING] File {index} points outside the PKG ({entry.byte_offset:#x}+{entry.size:#x} > {pkg_size:#x}). Ignoring.")
                continue

            pkg_io.seek(entry.byte_offset)
            data = pkg_io.read(entry.size)

            ext = detect_extension(data)
            name = entry_filename(index, ext)

            with open(os.path.join(out_dir, name), "wb") as out:
                out.write(data)

            print(f"Extracted: {name}")
            written.append(name)

            if DUMP_UNKNOWN and ext == GENERIC_EXT:
                hexdump.hexdump(data[:0x10])

    print("\nExtracted successfully!")
    return written
