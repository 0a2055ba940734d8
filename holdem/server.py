"""A static file server for the web build of the game."""

from __future__ import annotations

import argparse
import logging
from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer

logger = logging.getLogger(__name__)

WASM_CONTENT_TYPE = "application/wasm"


class WasmRequestHandler(SimpleHTTPRequestHandler):
    """Serves files from a directory, labelling WebAssembly correctly."""

    def guess_type(self, path):
        if str(path).endswith(".wasm"):
            return WASM_CONTENT_TYPE
        return super().guess_type(path)


def create_server(
    host: str = "", port: int = 8080, directory: str = "web"
) -> ThreadingHTTPServer:
    """Create a server for ``directory`` bound to ``host``:``port``."""
    handler = partial(WasmRequestHandler, directory=directory)
    return ThreadingHTTPServer((host, port), handler)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Serve the web build.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--directory", default="web")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    with create_server(args.host, args.port, args.directory) as server:
        logger.info("Starting server on %s:%d...", args.host, args.port)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass


if __name__ == "__main__":
    main()