import hashlib
import os

BLOCKSIZE = int(os.environ.get("DUPLICATES_BLOCKSIZE", "65536"))

# http://isthe.com/chongo/tech/comp/fnv/
FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
_MASK_64 = 0xFFFFFFFFFFFFFFFF


def digest_file(filepath, blocksize: int = BLOCKSIZE) -> str:
    """Compute the MD5 hex digest of a file (in blocks for large files)."""
    if blocksize <= 0:
        raise ValueError(f"blocksize must be positive, got {blocksize}")
    hasher = hashlib.md5()
    with open(filepath, 'rb') as f:
        while True:
            buf = f.read(blocksize)
            if not buf:
                break
            hasher.update(buf)
    return hasher.hexdigest()


def bucket_hash(data) -> int:
    """Return the 64-bit FNV-1a hash of ``data`` (``str`` is UTF-8 encoded).

    Only meant for bucket placement; it is not collision resistant.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    value = FNV_OFFSET_BASIS
    for byte in data:
        value ^= byte
        value = (value * FNV_PRIME) & _MASK_64
    return value
