"""Send lines typed on standard input as UDP datagrams."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Iterable
from typing import TextIO

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 42069
PROMPT = ">"


def send_lines(
    lines: Iterable[str],
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    prompt_out: TextIO | None = None,
) -> int:
    """Send each line as one datagram, prompting before each read.

    Returns the number of lines sent.
    """
    prompt_out = prompt_out if prompt_out is not None else sys.stdout
    source = iter(lines)
    sent = 0
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.connect((host, port))
        while True:
            prompt_out.write(PROMPT)
            prompt_out.flush()
            try:
                line = next(source)
            except StopIteration:
                return sent
            try:
                sock.send(line.encode())
            except OSError:
                # Delivery is best effort; a refused datagram is not fatal.
                pass
            sent += 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send standard input lines over UDP.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="destination host")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="destination port")
    args = parser.parse_args(argv)
    try:
        send_lines(sys.stdin, args.host, args.port, sys.stdout)
    except KeyboardInterrupt:
        return 0
    except OSError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())