#
# Runner base class for the windows build tooling clis
#

import argparse
import logging
import pathlib
from functools import cached_property, wraps
from typing import Callable, Optional, Tuple, Type, Union

from frozendict import frozendict

import coloredlogs
import verboselogs

LOG_LEVELS = (("debug", logging.DEBUG), ("info", logging.INFO), ("warn", logging.WARN),
              ("error", logging.ERROR))
LOG_FIELD_STYLES = frozendict(
    name=frozendict(color="blue"), levelname=frozendict(color="cyan", bold=True))
LOG_FMT = "%(name)s %(levelname)s %(message)s"
LOG_LEVEL_STYLES = frozendict(
    critical=frozendict(bold=True, color="red"),
    debug=frozendict(color="green"),
    error=frozendict(color="red", bold=True),
    info=frozendict(color="white", bold=True),
    notice=frozendict(color="magenta", bold=True),
    spam=frozendict(color="green", faint=True),
    success=frozendict(bold=True, color="green"),
    verbose=frozendict(color="blue"),
    warning=frozendict(color="yellow", bold=True))

ErrorTypes = Union[Type[Exception], Tuple[Type[Exception], ...]]


def catches(errors: ErrorTypes) -> Callable:
    """Method decorator to catch specified errors

    logs and returns 1 for sys.exit if error/s are caught

    can be used as so:

    ```python

    class MyRunner(runner.Runner):

        @runner.catches((MyError, OSError))
        def run(self):
            self.generate()
    ```

    """

    def wrapper(fun: Callable) -> Callable:

        @wraps(fun)
        def wrapped(self, *args, **kwargs) -> Optional[int]:
            try:
                return fun(self, *args, **kwargs)
            except errors as e:
                self.log.error(str(e) or repr(e))
                return 1

        wrapped.__wrapped__.__catches__ = errors
        return wrapped

    return wrapper


class Runner(object):

    def __init__(self, *args):
        self._args = args

    @cached_property
    def args(self) -> argparse.Namespace:
        """Parsed args"""
        return self.parser.parse_args(self._args)

    @property
    def log_field_styles(self):
        return LOG_FIELD_STYLES

    @property
    def log_fmt(self):
        return LOG_FMT

    @property
    def log_level_styles(self):
        return LOG_LEVEL_STYLES

    @cached_property
    def log(self) -> verboselogs.VerboseLogger:
        """Instantiated logger"""
        verboselogs.install()
        logger = logging.getLogger(self.name)
        coloredlogs.install(
            field_styles=self.log_field_styles,
            level_styles=self.log_level_styles,
            fmt=self.log_fmt,
            level=self.log_level,
            logger=logger,
            isatty=True)
        # install only lowers the logger level
        logger.setLevel(self.log_level)
        return logger

    @cached_property
    def log_level(self) -> int:
        """Log level parsed from args"""
        return dict(LOG_LEVELS)[self.args.log_level]

    @property
    def name(self) -> str:
        """Name of the runner"""
        return self.__class__.__name__

    @cached_property
    def parser(self) -> argparse.ArgumentParser:
        """Argparse parser"""
        parser = argparse.ArgumentParser(allow_abbrev=False)
        self.add_arguments(parser)
        return parser

    @cached_property
    def path(self) -> pathlib.Path:
        """Directory the runner works in"""
        return pathlib.Path(self.args.path)

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Override this method to add custom arguments to the arg parser"""
        parser.add_argument(
            "--log-level",
            "-l",
            choices=[level[0] for level in LOG_LEVELS],
            default="info",
            help="Log level to display")
        parser.add_argument("path", help="Directory to work in")