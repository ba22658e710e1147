# minitalk

A small messaging pair for POSIX systems. A client sends a text message to a
server process using only two signals. Each byte goes out as eight signals,
least significant bit first: `SIGUSR1` stands for a 0 bit and `SIGUSR2` for a
1 bit. The server acknowledges every bit with `SIGUSR1`, and the client waits
for that before it sends the next one. A NUL byte ends the message, and the
server then prints the whole message on its own line.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id and then waits for messages until
it is interrupted with Ctrl-C:

```
minitalk-server
Server PID: 4242
```

From another terminal, send a message to that process id:

```
minitalk-client 4242 "hello there"
```

The server prints `hello there`. Messages are sent as bytes; anything after an
embedded NUL byte is not sent. The server decodes what it receives as UTF-8,
replacing bytes that do not decode.

If the client is not given exactly two arguments, it prints
`Usage: ./client <server_pid> <message>` and exits with status 1. The process
id is read like a C `atoi` (leading whitespace, an optional sign, then digits).
If it is not positive, or no such process can be signalled, the client prints
`Error: Invalid server PID.` and exits with status 1.

### Receipt confirmation

Both commands accept `--confirm-receipt`. The server started with it also sends
`SIGUSR2` once a full message has arrived; a client started with it (the flag
must come before the process id) prints `Message received.` when it gets that
signal:

```
minitalk-server --confirm-receipt
minitalk-client --confirm-receipt 4242 "hello there"
```

The same behaviour is available from Python through
`Server(confirm_receipt=True)` and `Client(pid, confirm_receipt=True)`, both of
which also take an `output` stream to write to instead of standard output.
`Client.send(message)` returns the number of bits it sent, and
`Server.handle(signum, sender_pid)` processes a single bit signal.

## Library

The protocol is also available without signals, which is useful for testing
and for other transports:

```python
from minitalk.protocol import ByteDecoder, MessageAssembler, encode_message

decoder = ByteDecoder()
assembler = MessageAssembler()
messages = []
for bit in encode_message("hi"):
    byte = decoder.feed(bit)
    if byte is not None:
        message = assembler.feed(byte)
        if message is not None:
            messages.append(message)
```

After the loop, `messages` is `[b"hi"]`. Each `Bit` knows the signal that
carries it (`Bit.ONE.signal`), and `Bit.from_signal` maps a signal back to a
bit.

The package also has helper modules:

- `minitalk.chars`: ASCII classification (`isalpha`, `isdigit`, `isalnum`,
  `isascii`, `isprint`) and case conversion (`tolower`, `toupper`) on integer
  codes or one-character strings.
- `minitalk.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`
  and `memmove` on `bytes` and `bytearray`.
- `minitalk.strings`: string helpers with C-string semantics, such as `atoi`,
  `split`, `strchr`, `strnstr`, `strlcpy`, `strlcat`, `strtrim` and `substr`.
  Searches return an index, or `None` when nothing is found.
- `minitalk.linkedlist`: `LinkedList` of `Node`s, with `append`, `prepend`,
  `last`, `pop_front`, `for_each`, `map` and `clear`; the last three accept a
  `delete` callback for released contents.
- `minitalk.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` on a text
  stream.
- `minitalk.printf`: `sprintf` and `printf` for the
  `%c %s %d %i %u %x %X %p %%` conversions, plus `itoa_base`. An unknown
  conversion is reproduced literally; a format ending in a lone `%`, or one
  that runs out of arguments, raises `FormatError`.

## Limitations

- The server needs `signal.sigwaitinfo` to learn which process sent each
  signal; on platforms without it (macOS, for example) `serve_forever` raises
  `RuntimeError`.
- The client waits for each acknowledgement with no timeout, so it blocks for
  good if the server stops answering.
- The server handles one sender at a time; bits from two clients sending at
  once are mixed together.

## Running the tests

```
pip install .[test]
pytest
```