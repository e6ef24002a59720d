"""Main entry point for the Alice Chess terminal demo."""

import logging
import sys
from typing import List, Optional

from alice_chess.app import App, build_session
from alice_chess.config import load_config
from alice_chess.exceptions import AliceChessError
from alice_chess.screen import CursesScreen

LOG_FORMAT = "alice-chess: %(asctime)s %(levelname)s %(name)s: %(message)s"


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the demo on the controlling terminal.

    Esc quits with exit code 0. Any initialization failure or engine
    rejection is logged and ends the process with exit code 1.

    :param argv: Command-line arguments, defaults to sys.argv[1:]
    :type argv: Optional[List[str]]
    :return: Process exit code
    :rtype: int
    """
    try:
        config = load_config(argv)
    except AliceChessError as e:
        print(e, file=sys.stderr)
        return 1

    logging.basicConfig(filename=config.log_file, filemode="w", level=config.log_level, format=LOG_FORMAT)
    logger = logging.getLogger("alice_chess")
    logger.info("start log")

    screen = CursesScreen()
    try:
        screen.init()
        session = build_session(screen, config, logger)
        App(screen, session, turns=config.turns, log=logger).run()
    except AliceChessError:
        logger.exception("Fatal error")
        return 1
    finally:
        screen.fini()
    return 0


if __name__ == "__main__":
    sys.exit(main())
