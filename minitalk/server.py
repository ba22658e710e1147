"""The receiving side: decodes signals into messages and prints them."""

from __future__ import annotations

import argparse
import contextlib
import os
import signal
import sys
from typing import List, Optional, TextIO

from minitalk.printf import sprintf
from minitalk.protocol import Bit, ByteDecoder, MessageAssembler

_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


class Server:
    """Turns incoming bit signals into printed messages, acknowledging each bit."""

    def __init__(self, confirm_receipt: bool = False, output: Optional[TextIO] = None) -> None:
        self.confirm_receipt = confirm_receipt
        self.output = output
        self._decoder = ByteDecoder()
        self._assembler = MessageAssembler()

    @property
    def _stream(self) -> TextIO:
        return self.output if self.output is not None else sys.stdout

    @staticmethod
    def _notify(pid: int, signum: int) -> None:
        with contextlib.suppress(OSError):
            os.kill(pid, signum)

    def handle(self, signum: int, sender_pid: int) -> None:
        """Process one bit signal from ``sender_pid`` and acknowledge it."""
        bit = Bit.from_signal(signum)
        value = self._decoder.feed(bit)
        if value is not None:
            message = self._assembler.feed(value)
            if message is not None:
                stream = self._stream
                stream.write(message.decode("utf-8", errors="replace") + "\n")
                stream.flush()
                if self.confirm_receipt:
                    self._notify(sender_pid, signal.SIGUSR2)
        self._notify(sender_pid, signal.SIGUSR1)

    def serve_forever(self) -> None:
        """Print this process's id, then handle bit signals until interrupted."""
        if not hasattr(signal, "sigwaitinfo"):
            raise RuntimeError("this platform cannot report the sender of a signal")
        stream = self._stream
        stream.write(sprintf("Server PID: %d\n", os.getpid()))
        stream.flush()
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[List[str]] = None) -> int:
    """Run a server until interrupted."""
    parser = argparse.ArgumentParser(
        prog="minitalk-server", description="Receive messages sent as signals."
    )
    parser.add_argument(
        "--confirm-receipt",
        action="store_true",
        help="signal the sender once a whole message has arrived",
    )
    args = parser.parse_args(argv)
    try:
        Server(confirm_receipt=args.confirm_receipt).serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())