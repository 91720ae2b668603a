import hashlib

import pytest

from duplicates import bucket_hash, digest_file


def test_digest_file(tmp_path):
    file_path = tmp_path / 'sample.txt'
    content = b'hello world\n'
    file_path.write_bytes(content)
    expected = hashlib.md5(content).hexdigest()
    assert digest_file(file_path) == expected


def test_digest_is_lowercase_hex_of_fixed_width(tmp_path):
    file_path = tmp_path / 'empty.bin'
    file_path.write_bytes(b'')
    digest = digest_file(file_path)
    assert len(digest) == 32
    assert digest == digest.lower()
    int(digest, 16)


def test_digest_independent_of_blocksize(tmp_path):
    file_path = tmp_path / 'data.bin'
    file_path.write_bytes(bytes(range(256)) * 40)
    digests = {digest_file(file_path, blocksize=size) for size in (1, 7, 256, 4096, 1 << 20)}
    assert len(digests) == 1


def test_single_byte_change_changes_digest(tmp_path):
    first = tmp_path / 'first.bin'
    second = tmp_path / 'second.bin'
    first.write_bytes(b'abcdefgh' * 100)
    second.write_bytes(b'abcdefgh' * 99 + b'abcdefgi')
    assert digest_file(first) != digest_file(second)


def test_digest_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        digest_file(tmp_path / 'nope.txt')


def test_digest_rejects_non_positive_blocksize(tmp_path):
    file_path = tmp_path / 'sample.txt'
    file_path.write_bytes(b'x')
    with pytest.raises(ValueError):
        digest_file(file_path, blocksize=0)


def test_bucket_hash_known_values():
    assert bucket_hash(b'') == 0xcbf29ce484222325
    assert bucket_hash(b'a') == 0xaf63dc4c8601ec8c
    assert bucket_hash(b'foobar') == 0x85944171f73967e8


def test_bucket_hash_accepts_text():
    assert bucket_hash('foobar') == bucket_hash(b'foobar')
    assert 0 <= bucket_hash('d41d8cd98f00b204e9800998ecf8427e') < 2 ** 64


def test_bucket_hash_high_bytes_stay_in_range():
    value = bucket_hash(b'\xff' * 64)
    assert 0 <= value < 2 ** 64
    assert value == bucket_hash(b'\xff' * 64)
