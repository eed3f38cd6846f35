# minitalk

A small messaging tool for POSIX systems that carries text from one process to another using only two signals.

- Every byte goes out as eight bits, most significant bit first.
- `SIGUSR1` carries a 0 and `SIGUSR2` carries a 1.
- After each bit the server sends `SIGUSR2` back to the sender. The client waits for that reply before it sends the next bit.
- A zero byte ends a message.

The server waits for signals with `signal.sigwaitinfo`, and the client waits with `signal.sigwait`. Both therefore need a platform where Python provides these functions.

## Install

```
pip install .
```

## Usage

Start the server in one terminal:

```
$ minitalk-server
Server PID = 12345
```

The server prints its process id. It then writes every byte it receives straight to standard output, and that includes the terminating zero byte of each message. It keeps running until it is interrupted with Ctrl-C.

From another terminal, send it a message:

```
$ minitalk-client 12345 "hello there"
Everything has been successfully received!
```

The client takes exactly two arguments:

- a process id made of digits only
- a message that is not empty

The message is sent as the bytes of the command-line argument. When it has been sent, the client prints the confirmation line shown above and exits with status 0.

If the arguments are wrong, the client prints one of these errors and exits with status 1:

- `ERROR` followed by `Invalid number of arguments`
- `ERROR` followed by `Invalid PID`
- `ERROR` followed by `Invalid message (empty)`

It prints `ERROR` followed by `Bad PID` when the process id is 0 or does not refer to a live process.

## Library

### `minitalk.protocol`

- `Bit` is an `IntEnum` with the members `ZERO` and `ONE`.
  - Its `signal` property gives the signal that carries the bit.
  - `Bit.from_signal` maps a signal back to a bit. It raises `ValueError` for any other signal.
- `encode_byte(value)` yields the eight bits of a byte, most significant first.
- `encode_message(message)` yields the bits of a `bytes` or `str` message, followed by a zero byte. A `str` is encoded as UTF-8.
- `BitDecoder.feed(bit)` adds one bit. It returns the completed byte after every eighth bit, and `None` otherwise. The `pending` property counts the bits of the current byte.

### `minitalk.client`

- `validate_args([pid, message])` returns the pid as an `int` together with the message. It raises `ArgumentError`, a subclass of `ValueError`, when the arguments are not valid.
- `send_message(pid, message)` sends the message and its terminator. It waits for an acknowledgement after each bit.
- `main(argv=None)` is the command-line entry point.

### `minitalk.server`

- `Server(output=None, acknowledge=None)` decodes bits into bytes.
  - `output` is a binary stream and defaults to standard output.
  - `acknowledge` is called with the sender's pid after every bit. By default it sends `SIGUSR2` to the sender.
- `Server.handle(signum, sender_pid)` processes one signal.
- `Server.serve()` prints the pid and runs the receive loop.
- `main(argv=None)` runs the server and returns 0 when it is interrupted.

### `minitalk.printf`

- `render(fmt, *args)` returns the formatted text, and `printf(fmt, *args, stream=None)` writes it and returns its length.
- The supported conversions are `%c %s %p %d %i %u %x %X %%`.
  - `%s` prints `(null)` for `None`.
  - `%p` prints `(nil)` for `None` or 0.
  - Integers are taken as 32-bit values.
  - Any other character after `%` prints nothing.
- `render` raises `TypeError` when an argument is missing or of the wrong type.
- `put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream, which defaults to standard output.

### Helper modules

- `minitalk.chars` classifies ASCII characters and converts their case: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and `to_upper`.
- `minitalk.numbers` offers two conversions:
  - `parse_int` reads a leading decimal integer and wraps it to 32 bits.
  - `format_int` turns an integer into decimal text.
- `minitalk.strings` offers these string helpers:
  - `find_char`, `rfind_char` and `bounded_find` search a string.
  - `compare_n` compares two strings.
  - `bounded_copy` and `bounded_concat` return a `BoundedResult` of the text and the length that was needed.
  - `substring`, `join`, `trim`, `split` and `map_indexed` build new strings.

## Limitations

- A single server does not mark where one message ends and the next begins. It writes the zero byte that ends each message and does nothing else with it.
- The client has no timeout. If the server never acknowledges a bit, the client waits forever.
- There is no check that the message arrived intact beyond the acknowledgement of each bit.

## Tests

```
pip install ".[test]"
pytest
```