import logging
import sys
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler


class BackTickHighlighter(RegexHighlighter):
    highlights = [r"`(?P<bold>[^`]*)`"]


def logger():
    return logging.getLogger("verdict")


def _handler(debug: bool, rich: bool) -> logging.Handler:
    if rich:
        handler = RichHandler(show_path=debug, highlighter=BackTickHighlighter())
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        return handler
    return logging.StreamHandler(sys.stdout)


def configure_logger(debug: bool, rich: bool = True):
    """Attach a handler to the `verdict` logger. Only the library's own logger
    is touched, the root logger stays under control of the test runner."""
    log = logger()
    for h in list(log.handlers):
        log.removeHandler(h)
    log.addHandler(_handler(debug, rich))
    log.setLevel(logging.DEBUG if debug else logging.INFO)
