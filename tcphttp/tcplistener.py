"""A TCP server that parses incoming HTTP requests and prints them."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import TextIO

from .request import Request, request_from_reader

DEFAULT_PORT = 42069


def format_request(request: Request) -> str:
    """Render a parsed request as the listener's report text."""
    line = request.request_line
    lines = [
        "Request line:",
        f"- Method: {line.method if line else ''}",
        f"- Target: {line.request_target if line else ''}",
        f"- Version: {line.http_version if line else ''}",
        "Headers:",
    ]
    lines.extend(f"- {key}: {value}" for key, value in request.headers.items())
    lines.append("Connection closed")
    lines.append("Body:")
    lines.append(request.body.decode("utf-8", "replace"))
    return "\n".join(lines)


def serve(host: str = "", port: int = DEFAULT_PORT, out: TextIO | None = None) -> None:
    """Accept connections forever, reporting each parsed request to *out*."""
    out = out if out is not None else sys.stdout
    with socket.create_server((host, port)) as server:
        while True:
            conn, _ = server.accept()
            with conn:
                print("Established Connection", file=out, flush=True)
                try:
                    with conn.makefile("rb", buffering=0) as stream:
                        request = request_from_reader(stream)
                except (ValueError, OSError) as err:
                    print(f"Error occured. {err}", file=out, flush=True)
                    continue
            print(format_request(request), file=out, flush=True)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print HTTP requests received over TCP.")
    parser.add_argument("--host", default="", help="address to listen on (default: all)")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port, sys.stdout)
    except KeyboardInterrupt:
        return 0
    except OSError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())