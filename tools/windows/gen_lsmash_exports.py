#!/usr/bin/env python3

# Generates the module-definition file used to link the L-SMASH dll
#
# usage
#
#  $ gen-lsmash-exports <path>
#
# where <path> is the directory holding `lsmash.h`, `lsmash.def` is written
# alongside it.
#

import pathlib
import sys
from functools import cached_property

from tools.base import runner
from tools.windows import def_file, lsmash_exports

ENCODING = "utf-8"
HEADER_FILENAME = "lsmash.h"
DEF_FILENAME = "lsmash.def"


class LsmashExportsGenerator(runner.Runner):

    @cached_property
    def def_path(self) -> pathlib.Path:
        return self.path.joinpath(DEF_FILENAME)

    @cached_property
    def header_path(self) -> pathlib.Path:
        return self.path.joinpath(HEADER_FILENAME)

    def generate(self) -> int:
        """Scans the header and writes the def file, returns the count of
        symbols found in the header"""
        with open(self.header_path, encoding=ENCODING) as header:
            # written with \n line endings on every host
            out = open(self.def_path, "w", encoding=ENCODING, newline="")
            with def_file.DefWriter(out) as writer:
                for rule, symbol in lsmash_exports.scan(header):
                    self.log.debug(f"[{rule}] {symbol}")
                    writer.export(symbol)
                scanned = writer.count
                writer.append(lsmash_exports.NON_PUBLIC_SYMBOLS)
        return scanned

    @runner.catches((lsmash_exports.LsmashExportsError, OSError, UnicodeDecodeError))
    def run(self) -> int:
        self.log.info(f"Scanning {self.header_path}")
        scanned = self.generate()
        self.log.success(
            f"Wrote {self.def_path}: {scanned} symbols from {HEADER_FILENAME}, "
            f"{len(lsmash_exports.NON_PUBLIC_SYMBOLS)} non-public")
        return 0


def main(*args) -> int:
    return LsmashExportsGenerator(*args).run()


def cli() -> int:
    return main(*sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:]))
