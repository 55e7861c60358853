"""Reference data for the checksum tests.

Expected digests are computed with hashlib directly so that the tests do
not trust the code under test. They are stored in a checksum.json sidecar
next to the test files.
"""

import hashlib
from pathlib import Path

import orjson

# hashlib constructors matching the display names of the registry
HASHLIB_REFERENCE = {
    "MD5": lambda: hashlib.md5(),
    "SHA-1": lambda: hashlib.sha1(),
    "SHA-224": lambda: hashlib.sha224(),
    "SHA-256": lambda: hashlib.sha256(),
    "SHA-384": lambda: hashlib.sha384(),
    "SHA-512": lambda: hashlib.sha512(),
    "SHA-512/224": lambda: hashlib.new("sha512_224"),
    "SHA-512/256": lambda: hashlib.new("sha512_256"),
    "SHA3-224": lambda: hashlib.sha3_224(),
    "SHA3-256": lambda: hashlib.sha3_256(),
    "SHA3-384": lambda: hashlib.sha3_384(),
    "SHA3-512": lambda: hashlib.sha3_512(),
    "SHAKE128-256": lambda: hashlib.shake_128(),
    "SHAKE256-512": lambda: hashlib.shake_256(),
    "BLAKE2s-256": lambda: hashlib.blake2s(digest_size=32),
    "BLAKE2b-256": lambda: hashlib.blake2b(digest_size=32),
    "BLAKE2b-384": lambda: hashlib.blake2b(digest_size=48),
    "BLAKE2b-512": lambda: hashlib.blake2b(digest_size=64),
}

SHAKE_LENGTHS = {"SHAKE128-256": 32, "SHAKE256-512": 64}

HELLO_SHA256 = (
    "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
)

TEST_FILES = {
    "empty.txt": b"",
    "hello.txt": b"hello",
    "lorem.txt": (
        b"Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do "
        b"eiusmod tempor incididunt ut labore et dolore magna aliqua.\n"
    ),
    # Larger than one read buffer
    "random.bin": bytes((i * 7919 + 13) % 256 for i in range(70_000)),
}


def reference_checksum(hash_name: str, data: bytes) -> str:
    """Compute a digest with hashlib directly, independent of hash1."""
    h = HASHLIB_REFERENCE[hash_name]()
    h.update(data)
    if hash_name in SHAKE_LENGTHS:
        return h.hexdigest(SHAKE_LENGTHS[hash_name])
    return h.hexdigest()


def write_checksum_sidecar(directory: Path) -> Path:
    """Write checksum.json listing every reference digest of the files."""
    entries = [
        {
            "filename": filename,
            "checksums": [
                {
                    "hashName": hash_name,
                    "checksum": reference_checksum(hash_name, data),
                }
                for hash_name in HASHLIB_REFERENCE
            ],
        }
        for filename, data in TEST_FILES.items()
    ]
    sidecar = directory / "checksum.json"
    sidecar.write_bytes(orjson.dumps(entries, option=orjson.OPT_INDENT_2))
    return sidecar


def load_checksum_sidecar(sidecar: Path) -> dict[str, dict[str, str]]:
    """Read checksum.json into {filename: {hashName: checksum}}."""
    entries = orjson.loads(sidecar.read_bytes())
    return {
        entry["filename"]: {
            c["hashName"]: c["checksum"] for c in entry["checksums"]
        }
        for entry in entries
    }
