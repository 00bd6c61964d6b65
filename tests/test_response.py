"""Tests for response building and serialization."""

import gzip

import pytest

from minihttp import Encoding, Response, Status


class TestStatus:
    """Status line vocabulary."""

    @pytest.mark.parametrize(
        "status, line",
        [
            (Status.OK, "200 OK"),
            (Status.CREATED, "201 Created"),
            (Status.BAD_REQUEST, "400 Bad Request"),
            (Status.NOT_FOUND, "404 Not Found"),
            (Status.METHOD_NOT_ALLOWED, "405 Method Not Allowed"),
            (Status.INTERNAL_SERVER_ERROR, "500 Internal Server Error"),
        ],
    )
    def test_lines(self, status, line):
        assert status.line == line
        assert str(status) == line


class TestSerialization:
    """Byte-exact wire format."""

    def test_no_body_has_no_headers(self):
        """A bodiless response is just the status line and a blank line."""
        assert Response(Status.NOT_FOUND).to_bytes() == b"HTTP/1.1 404 Not Found\r\n\r\n"

    def test_text_body(self):
        """Text bodies carry Content-Type and Content-Length."""
        assert Response.text("abc").to_bytes() == (
            b"HTTP/1.1 200 OK\r\n"
            b"Content-Type: text/plain\r\n"
            b"Content-Length: 3\r\n"
            b"\r\n"
            b"abc"
        )

    def test_empty_body_is_still_a_body(self):
        """An empty text body still emits headers with length 0."""
        assert Response.text("").to_bytes() == (
            b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\nContent-Length: 0\r\n\r\n"
        )

    def test_length_counts_bytes_not_characters(self):
        """Content-Length is the encoded size."""
        assert b"Content-Length: 2\r\n" in Response.text("é").to_bytes()

    def test_octet_stream(self):
        """Binary bodies use application/octet-stream."""
        wire = Response.octet_stream(b"\x00\x01").to_bytes()
        assert b"Content-Type: application/octet-stream\r\n" in wire
        assert wire.endswith(b"\r\n\r\n\x00\x01")

    def test_gzip_body(self):
        """With gzip negotiated the body is compressed before it is measured."""
        response = Response.text("hello hello hello").negotiate({"accept-encoding": "deflate, gzip"})
        assert response.encoding is Encoding.GZIP

        wire = response.to_bytes()
        head, body = wire.split(b"\r\n\r\n", 1)
        assert head.split(b"\r\n") == [
            b"HTTP/1.1 200 OK",
            b"Content-Encoding: gzip",
            b"Content-Type: text/plain",
            f"Content-Length: {len(body)}".encode(),
        ]
        assert gzip.decompress(body) == b"hello hello hello"

    def test_no_gzip_without_accept_encoding(self):
        """Without a matching accept-encoding the body goes out raw."""
        wire = Response.text("abc").negotiate({"accept-encoding": "br, deflate"}).to_bytes()
        assert b"Content-Encoding" not in wire
        assert b"Content-Length: 3\r\n" in wire

    def test_gzip_match_is_case_sensitive(self):
        """Only the lower-case substring `gzip` negotiates compression."""
        response = Response.text("abc").negotiate({"accept-encoding": "GZIP"})
        assert response.encoding is None

    def test_gzip_ignored_without_body(self):
        """A bodiless response stays bare even when gzip is accepted."""
        response = Response(Status.CREATED).negotiate({"accept-encoding": "gzip"})
        assert response.to_bytes() == b"HTTP/1.1 201 Created\r\n\r\n"

    def test_serialized_once(self):
        """Repeated to_bytes() calls return the cached rendering."""
        response = Response.text("abc").negotiate({"accept-encoding": "gzip"})
        first = response.to_bytes()
        assert response.to_bytes() is first

    def test_fresh_builders_are_identical(self):
        """Two equal builders serialize to identical bytes, gzip included."""
        def build():
            return Response.text("repeat me").negotiate({"accept-encoding": "gzip"})

        assert build().to_bytes() == build().to_bytes()
