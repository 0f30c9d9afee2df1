"""Console: provides the stream devices print to."""

import sys
from typing import TextIO

from dipswitch.container import resource


@resource
def output() -> TextIO:
    return sys.stdout
