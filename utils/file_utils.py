# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Change Description: read-only variant used to load ABI JSON from a file or stdin.

import contextlib
import pathlib
import sys
from typing import IO, Generator, Union


# https://stackoverflow.com/questions/17602878/how-to-handle-both-with-open-and-sys-stdout-nicely
@contextlib.contextmanager
def smart_open(filename: Union[str, pathlib.Path]) -> Generator[IO[bytes], None, None]:
    """Opens filename for binary reading. "-" yields stdin, which is left open afterwards."""
    if not filename:
        raise ValueError("filename must be a path or '-'")

    if filename == "-":
        # Yield the system stream directly; closing it would close the underlying FD.
        yield sys.stdin.buffer
        return

    fh = open(pathlib.Path(filename), "rb")
    try:
        yield fh
    finally:
        fh.close()


def read_bytes(filename: Union[str, pathlib.Path]) -> bytes:
    with smart_open(filename) as fh:
        return fh.read()
