import typing

GENERIC_EXT = ".dat"

# first match wins
MAGIC_TABLE = (
    (b"Atel", ".atel"),
    (b"PSMF", ".pmf"),
    (b"RIFF", ".at3"),
    (b"SSCF", ".ssc"),
    (b"\x89PNG", ".png"),
    (b"MBD\0", ".mbd"),
    (b"GTF\0", ".gtf"),
    (b"GT\0\x02", ".gtf"),
    (b"\0\0\0\0", ".mdl"),
    (b"FRR\0", ".frr"),
    (b"FEP\0", ".fep"),
)

KNOWN_EXTENSIONS = frozenset([ext for _, ext in MAGIC_TABLE] + [GENERIC_EXT])

def detect_extension(data: typing.Union[bytes, bytearray]):
    if len(data) < 4: return GENERIC_EXT

    header = bytes(data[:4])
    for magic, ext in MAGIC_TABLE:
        if header == magic:
            return ext

    return GENERIC_EXT
