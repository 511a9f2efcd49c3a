# webget

A small command-line tool and library that fetches a web page by opening a
TCP connection to the host's HTTP port (80), sending a minimal HTTP/1.1
`GET` request with `Connection: close`, and copying everything the server
sends back, byte for byte, until it closes the connection.

The response is written as is, headers included, followed by a newline.

## Installation

```
pip install .
```

## Command line

```
webget HOST PATH
```

For example:

```
webget example.com /index.html
```

Exactly two arguments are required. With any other number the program
prints a usage message to standard error and exits with status 1. A
connection or transfer error (`OSError`) or a host name that cannot be
encoded (`UnicodeError`) is printed to standard error and also gives
exit status 1. On success the exit status is 0.

## Library

```python
import sys
from webget.client import build_request, get_url

print(build_request("example.com", "/"))

get_url("example.com", "/", sys.stdout.buffer, 80)
```

All of these live in `webget.client`:

- `build_request(host, path)` returns the request text that is sent:
  the `GET` line, a `Host` header and `Connection: close`, ending in a
  blank line.
- `get_url(host, path, out=None, port=80)` connects, sends the request
  encoded as UTF-8 and writes the raw response bytes to the binary stream
  `out`, then a final `b"\n"`, and flushes it. When `out` is `None` the
  response goes to standard output's binary buffer. Errors are raised,
  not caught.
- `main(argv=None)` is the command-line entry point. It takes the
  arguments after the program name (defaulting to `sys.argv[1:]`) and
  returns the exit status.

## What it does not do

The tool speaks plain HTTP only: there is no HTTPS, no redirect following,
no parsing of the status line or headers, and no handling of chunked
transfer encoding. The response is copied exactly as received.

## Tests

```
pip install .[test]
pytest
```