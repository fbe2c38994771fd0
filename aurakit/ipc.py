"""Passing command-line arguments between instances of an application."""

from __future__ import annotations

import json
import os
import sys
import tempfile
import threading
from multiprocessing.connection import Client, Listener
from typing import Iterable, List, Optional, Tuple

from aurakit.events import Event, ParamEventArgs


def _address(app_id: str) -> Tuple[str, str]:
    if sys.platform.startswith("win"):
        return "\\\\.\\pipe\\" + app_id, "AF_PIPE"
    if sys.platform.startswith("linux"):
        return "\0" + app_id, "AF_UNIX"
    safe = app_id.replace(os.sep, "_")
    return os.path.join(tempfile.gettempdir(), f"{safe}.socket"), "AF_UNIX"


def _server_alive(address: str, family: str) -> bool:
    try:
        Client(address, family).close()
    except OSError:
        return False
    return True


def _open_listener(address: str, family: str) -> Optional[Listener]:
    """Listen on the address, or return None if a server already owns it."""
    try:
        return Listener(address, family, backlog=16)
    except OSError:
        stale = (
            family == "AF_UNIX"
            and not address.startswith("\0")
            and os.path.exists(address)
            and not _server_alive(address, family)
        )
        if not stale:
            return None
    try:
        os.unlink(address)
        return Listener(address, family, backlog=16)
    except OSError as error:
        raise RuntimeError(f"Unable to create the IPC server: {error}") from error


class InterProcessCommunicator:
    """The first instance for an id becomes a server; later ones are clients.

    Clients send their arguments to the server, which invokes
    ``command_received`` with them.
    """

    def __init__(self, app_id: str) -> None:
        if not app_id:
            raise ValueError("The id must not be empty.")
        self._address, self._family = _address(app_id)
        self._command_received: Event[ParamEventArgs[List[str]]] = Event()
        self._lock = threading.Lock()
        self._listener = _open_listener(self._address, self._family)
        self._server = self._listener is not None
        self._running = self._server
        self._thread: Optional[threading.Thread] = None
        if self._server:
            self._thread = threading.Thread(target=self._serve, name="IPCServer", daemon=True)
            self._thread.start()

    @property
    def command_received(self) -> Event[ParamEventArgs[List[str]]]:
        """Invoked on the server with the arguments a client sent."""
        return self._command_received

    def is_server(self) -> bool:
        return self._server

    def is_client(self) -> bool:
        return not self._server

    def communicate(self, args: Iterable[str], exit_if_client: bool = False) -> bool:
        """Deliver arguments to the server instance.

        On the server, ``command_received`` is invoked directly. A client
        exits the process afterwards if ``exit_if_client`` is true.
        Returns whether the arguments reached the server.
        """
        arguments = [str(arg) for arg in args]
        if self._server:
            self._command_received.invoke(ParamEventArgs(arguments))
            return True
        try:
            with Client(self._address, self._family) as conn:
                conn.send_bytes(json.dumps(arguments).encode("utf-8"))
            sent = True
        except OSError:
            sent = False
        if exit_if_client:
            sys.exit(0)
        return sent

    def close(self) -> None:
        """Stop the server, if this instance is one."""
        with self._lock:
            if not self._running:
                return
            self._running = False
        try:
            Client(self._address, self._family).close()
        except OSError:
            pass
        if self._thread is not None:
            self._thread.join(timeout=5)
        if self._listener is not None:
            self._listener.close()

    def _serve(self) -> None:
        assert self._listener is not None
        while self._running:
            try:
                conn = self._listener.accept()
            except OSError:
                break
            with conn:
                if not self._running:
                    break
                try:
                    raw = conn.recv_bytes()
                except (EOFError, OSError):
                    continue
            try:
                arguments = json.loads(raw.decode("utf-8"))
            except (ValueError, UnicodeDecodeError):
                continue
            if isinstance(arguments, list) and all(isinstance(a, str) for a in arguments):
                self._command_received.invoke(ParamEventArgs(arguments))