# tcphttp

A small library for parsing HTTP/1.1 requests straight off a byte stream. It also has two
command-line tools for trying it out.

- `tcphttp.headers`: `Headers` is a `dict` of lower-cased header names to values.
  `Headers.get` matches names without regard to case. Repeated headers are joined with
  `", "`. `Headers.parse` takes one CRLF-terminated line at a time. `is_token` checks
  whether a name is made only of HTTP token characters.
- `tcphttp.request`: `request_from_reader` reads from any object that has a `read(size)`
  method, such as a socket file or `io.BytesIO`. It takes data in chunks of any size and
  parses the request line, the headers and a body bounded by `Content-Length`. `Request.feed`
  does the same work for bytes you push in yourself. It returns how many bytes it consumed,
  and `Request.done` tells you when the request is complete.
- `tcphttp.tcplistener` and `tcphttp.udpsender`: the two command-line tools.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parsing a request

```python
import io
from tcphttp.request import request_from_reader

raw = (
    b"POST /submit HTTP/1.1\r\n"
    b"Host: localhost:42069\r\n"
    b"Content-Length: 13\r\n"
    b"\r\n"
    b"hello world!\n"
)
request = request_from_reader(io.BytesIO(raw))

request.request_line.method          # "POST"
request.request_line.request_target  # "/submit"
request.request_line.http_version    # "1.1"
request.headers.get("Host")          # "localhost:42069"
request.body                         # b"hello world!\n"
```

Errors:

- A malformed request line, a malformed `Content-Length`, or a body longer than the declared
  length raises `RequestError`.
- If the stream ends before the request is complete, `IncompleteRequestError` is raised. It
  is a subclass of `RequestError`.
- A bad header line raises `HeaderError`. That covers a missing `:`, a space before the
  colon, and a name with characters that are not allowed in a token.

Both `RequestError` and `HeaderError` are subclasses of `ValueError`.

Rules the parser applies:

- Only `HTTP/1.1` is accepted.
- Every letter in the method must be uppercase.
- A body is read only when a `Content-Length` header is present. Without that header, any
  bytes after the headers are ignored and `body` stays `b""`.

`parse_request_line(data)` parses just the request line. It returns a `RequestLine` and the
number of bytes consumed, or `(None, 0)` if the line is not complete yet.

## Parsing headers by hand

```python
from tcphttp.headers import Headers

headers = Headers()
data = b"Set-Person: Eli\r\nSet-Person: Vika\r\n\r\n"
while True:
    consumed, done = headers.parse(data)
    data = data[consumed:]
    if done:
        break

headers["set-person"]  # "Eli, Vika"
```

## Command-line tools

Listen for TCP connections and print each parsed request:

```
tcphttp-listener [--host HOST] [--port PORT]
```

By default it listens on all addresses, port 42069. For each connection it reads one
request. It prints the request line, the headers and the body. If the request cannot be
parsed, it prints the error and goes on to the next connection. The report text comes from
`tcplistener.format_request`, and the loop is `tcplistener.serve`.

Read lines from standard input and send each one as a UDP datagram:

```
tcphttp-udpsender [--host HOST] [--port PORT]
```

The destination defaults to `localhost:42069`. The tool prints a `>` prompt before reading
each line and stops at end of input. Sending is best effort: if a datagram is refused, the
tool skips it and carries on. The same loop can be called as `udpsender.send_lines`.

## What it does not do

- The listener is not an HTTP server. It never sends a response. It closes each connection
  once the request has been read.
- The listener reads only one request per connection.
- Chunked transfer encoding is not supported. Only a `Content-Length` body is read.