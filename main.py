import logging
import sys

from _version import __version__
from app_state import AppState
from bridge import serve
from handlers import RequestHandlers

logger = logging.getLogger(__name__)

USAGE = (
    "timetable-backend - theme and schedule service for the timetable UI\n\n"
    "Usage:\n"
    "  timetable-backend [--debug]\n"
    "  timetable-backend -v\n"
    "  timetable-backend -h\n\n"
    "Reads one JSON request per line on stdin and answers on stdout.\n"
)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None, stdin=None, stdout=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args:
        print(USAGE)
        return 0

    _configure_logging("--debug" in args)

    state = AppState.from_cwd()
    logger.info("Theme file: %s", state.theme_path)
    logger.info("Schedule file: %s", state.data_path)

    handlers = RequestHandlers(state)
    serve(handlers, stdin or sys.stdin, stdout or sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
