"""The sending side: transmits a message to a server one bit at a time."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
import time
from typing import Iterator, List, Optional, TextIO, Union

from minitalk.printf import printf
from minitalk.protocol import encode_message
from minitalk.strings import atoi

_POLL_INTERVAL = 10e-6
_CONFIRM_FLAG = "--confirm-receipt"


class InvalidServerError(ValueError):
    """Raised when the server process id is not usable."""


def parse_pid(text: str) -> int:
    """Parse a server process id, which must be positive."""
    pid = atoi(text)
    if pid <= 0:
        raise InvalidServerError(f"invalid server PID: {text!r}")
    return pid


class Client:
    """Sends messages to one server, waiting for an acknowledgement per bit.

    Each bit is acknowledged with SIGUSR1. With ``confirm_receipt`` the client
    also listens for SIGUSR2 and reports that the whole message arrived.
    """

    def __init__(
        self,
        server_pid: int,
        confirm_receipt: bool = False,
        output: Optional[TextIO] = None,
    ) -> None:
        if server_pid <= 0:
            raise InvalidServerError(f"invalid server PID: {server_pid}")
        try:
            os.kill(server_pid, 0)
        except OSError as exc:
            raise InvalidServerError(f"no reachable process {server_pid}") from exc
        self.server_pid = server_pid
        self.confirm_receipt = confirm_receipt
        self.output = output
        self._acked = False

    def _on_signal(self, signum: int, frame: object) -> None:
        if signum == signal.SIGUSR1:
            self._acked = True
        elif signum == signal.SIGUSR2:
            stream = self.output if self.output is not None else sys.stdout
            stream.write("Message received.\n")
            stream.flush()

    @contextlib.contextmanager
    def _listening(self) -> Iterator[None]:
        watched = [signal.SIGUSR1]
        if self.confirm_receipt:
            watched.append(signal.SIGUSR2)
        previous = {signum: signal.signal(signum, self._on_signal) for signum in watched}
        try:
            yield
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)

    def send(self, message: Union[str, bytes]) -> int:
        """Send ``message`` and its terminator; return the number of bits sent."""
        sent = 0
        with self._listening():
            for bit in encode_message(message):
                self._acked = False
                os.kill(self.server_pid, bit.signal)
                sent += 1
                while not self._acked:
                    time.sleep(_POLL_INTERVAL)
        return sent


def main(argv: Optional[List[str]] = None) -> int:
    """Send one message to a server: [--confirm-receipt] <server_pid> <message>."""
    args = list(sys.argv[1:] if argv is None else argv)
    confirm = bool(args) and args[0] == _CONFIRM_FLAG
    if confirm:
        args = args[1:]
    if len(args) != 2:
        printf("Usage: ./client <server_pid> <message>\n")
        return 1
    try:
        client = Client(parse_pid(args[0]), confirm_receipt=confirm)
    except InvalidServerError:
        printf("Error: Invalid server PID.\n")
        return 1
    client.send(os.fsencode(args[1]))
    return 0


if __name__ == "__main__":
    sys.exit(main())