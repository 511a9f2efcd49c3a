"""Fetch a page over HTTP/1.1 and copy the raw response to a stream."""

from __future__ import annotations

import socket
import sys
from typing import BinaryIO, Sequence

HTTP_PORT = 80
_CHUNK_SIZE = 4096


def build_request(host: str, path: str) -> str:
    """Return the HTTP/1.1 GET request for ``path`` on ``host``."""
    return (
        f"GET {path} HTTP/1.1\r\n"
        f"Host: {host}\r\n"
        "Connection: close\r\n"
        "\r\n"
    )


def get_url(
    host: str,
    path: str,
    out: BinaryIO | None = None,
    port: int = HTTP_PORT,
) -> None:
    """Request ``path`` from ``host`` and write everything the server sends to ``out``.

    The response is copied byte for byte until the server closes the
    connection, then a single newline is written.
    """
    if out is None:
        out = sys.stdout.buffer

    with socket.create_connection((host, port)) as conn:
        conn.sendall(build_request(host, path).encode("utf-8"))
        while chunk := conn.recv(_CHUNK_SIZE):
            out.write(chunk)

    out.write(b"\n")
    out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command: ``webget HOST PATH``. Returns the exit status."""
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "webget"
    args = list(sys.argv[1:] if argv is None else argv)

    if len(args) != 2:
        sys.stderr.write(f"Usage: {prog} HOST PATH\n")
        sys.stderr.write(f"\tExample: {prog} stanford.edu /class/cs144\n")
        return 1

    host, path = args
    try:
        get_url(host, path)
    except (OSError, UnicodeError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())