#
# Writes module-definition (.def) files for the MSVC linker
#
# https://docs.microsoft.com/en-us/cpp/build/reference/module-definition-dot-def-files
#

from typing import Iterable, TextIO

EXPORTS = "EXPORTS"
INDENT = "    "


class DefWriter(object):
    """Streams an `EXPORTS` section to `out`

    Exported symbols are written indented as they are found, `append` adds
    a trailing block of unindented names with no final newline.
    """

    def __init__(self, out: TextIO):
        self.out = out
        self.count = 0
        self.out.write(f"{EXPORTS}\n")

    def __enter__(self) -> "DefWriter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def append(self, symbols: Iterable[str]) -> None:
        symbols = list(symbols)
        self.out.write("\n".join(symbols))
        self.count += len(symbols)

    def close(self) -> None:
        self.out.flush()
        self.out.close()

    def export(self, symbol: str) -> None:
        self.out.write(f"{INDENT}{symbol}\n")
        self.count += 1
