"""Line-oriented read-eval-print loop for malt."""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from malt import config
from malt.interpreter import Interpreter
from malt.types.errors import MaltError

logger = logging.getLogger(__name__)


def repl(
    interp: Interpreter,
    read_line: Callable[[str], str] = input,
    out: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    """Run the loop until end of input. Evaluation errors never end it.

    Results and error messages go to `out`. Output from `prn` always goes to
    sys.stdout, whatever `out` is.
    """
    out = out or sys.stdout
    prompt = config.get_prompt() if prompt is None else prompt
    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            print(file=out)
            return
        except KeyboardInterrupt:
            print(file=out)
            continue

        try:
            result = interp.rep(line)
        except MaltError as ex:
            logger.debug("evaluation failed: %r", line, exc_info=True)
            print(f"error: {ex}", file=out)
            continue
        except RecursionError:
            logger.debug("recursion limit hit: %r", line)
            print("error: stack overflow", file=out)
            continue
        except KeyboardInterrupt:
            print("interrupted", file=out)
            continue

        if result is not None:
            print(result, file=out)


def main() -> None:
    config.configure_logging()
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)
    try:
        import readline  # noqa: F401  line editing and history for input()
    except ImportError:
        pass
    repl(Interpreter())


if __name__ == "__main__":
    main()
