from __future__ import annotations

"""
Simple TCP REPL server for the cattywampus calculator.

Protocol: JSON per line over TCP.
- Request:  {"cmd": "eval", "code": "3 4 add"}
            {"cmd": "stack"} | {"cmd": "clear"} | {"cmd": "functions"}
- Response: {"ok": true, "stack": ["7"], "errors": []}
            or {"ok": false, "error": <message>}

Every connection gets its own Session, and with it its own Stack. The function
registry is built once and shared read-only between connections.
"""

import json
import logging
import socket
import threading
from typing import Any, Tuple

from cattywampus import config
from cattywampus.errors import CattywampusSyntaxError
from cattywampus.interpreter import Session
from cattywampus.registry import FunctionRegistry, intrinsic_registry

logger = logging.getLogger(__name__)


def _stack_payload(session: Session) -> list[str]:
    return [str(v) for v in session.stack]


def handle_request(session: Session, req: Any) -> dict:
    """Run one decoded request against `session` and build the response."""
    if not isinstance(req, dict):
        return {"ok": False, "error": "Request must be a JSON object"}
    cmd = req.get("cmd")
    if cmd == "eval":
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "code must be a string"}
        try:
            errors = session.eval(code)
        except CattywampusSyntaxError as ex:
            return {"ok": False, "error": str(ex), "stack": _stack_payload(session)}
        return {"ok": True, "stack": _stack_payload(session), "errors": [str(e) for e in errors]}
    if cmd == "stack":
        return {"ok": True, "stack": _stack_payload(session), "errors": []}
    if cmd == "clear":
        session.clear()
        return {"ok": True, "stack": [], "errors": []}
    if cmd == "functions":
        return {
            "ok": True,
            "functions": {key: str(fn.signature) for key, fn in session.registry.items()},
        }
    return {"ok": False, "error": f"Unknown cmd: {cmd}"}


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None,
                 registry: FunctionRegistry | None = None):
        default_host, default_port = config.get_server_address()
        self.host = host if host is not None else default_host
        self.port = port if port is not None else default_port
        self.registry = registry if registry is not None else intrinsic_registry()

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("Listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.info("Session opened for %s:%d", *addr)
        session = Session(self.registry)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        req = json.loads(line.decode("utf-8"))
                    except (UnicodeDecodeError, json.JSONDecodeError) as ex:
                        resp = {"ok": False, "error": f"Invalid request: {ex}"}
                    else:
                        resp = handle_request(session, req)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.info("Session closed for %s:%d", *addr)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
