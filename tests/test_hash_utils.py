"""Tests for group key hashing."""

import hashlib

from table2geojson.utils.hash_utils import parse_hash


class TestParseHash:

    def test_digest_is_twenty_bytes(self):
        assert len(parse_hash("A")) == 20

    def test_is_deterministic(self):
        assert parse_hash("route-12") == parse_hash("route-12")

    def test_matches_sha1_of_utf8_key(self):
        assert parse_hash("経路") == hashlib.sha1("経路".encode("utf-8")).digest()

    def test_different_keys_differ(self):
        assert parse_hash("A") != parse_hash("B")

    def test_empty_key(self):
        assert parse_hash("") == hashlib.sha1(b"").digest()
