import sys
import traceback
import cc_unpack
import cc_repack

def show_usage():
    print("Use:")
    print("  Extract:     cctool -u <File.fse> <Folder> [-v]")
    print("  Repack:      cctool -r <File.fse> <Folder>")
    print("  -v (hexdump the header of files with an unknown signature)")

def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    print("Crisis Core: Final Fantasy VII - PKG/FSE Extractor/Repacker")
    print("-----------------------------------------------------------")

    if len(argv) < 3:
        show_usage()
        return 0

    mode, fse_path, folder = argv[:3]

    if len(argv) > 3 and argv[3] == "-v":
        cc_unpack.DUMP_UNKNOWN = True

    try:
        if mode == "-u":
            cc_unpack.extract(fse_path, folder)

        elif mode == "-r":
            cc_repack.repack(fse_path, folder)

        else:
            show_usage()

    except Exception as e:
        print(f"\n[ERROR]: {type(e).__name__}: {e}")
        traceback.print_exc()
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
