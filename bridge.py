import json
import logging

from timetable_store import TimetableError

logger = logging.getLogger(__name__)


class BridgeError(Exception):
    """Request could not be routed or its arguments are invalid."""


def _index_arg(args: dict, name: str) -> int:
    value = args.get(name)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise BridgeError(f"invalid args for save_cell: {name} must be a non-negative integer")
    return value


def _text_arg(args: dict, name: str) -> str:
    value = args.get(name)
    if not isinstance(value, str):
        raise BridgeError(f"invalid args for save_cell: {name} must be a string")
    return value


def _get_theme(handlers, _args):
    return handlers.get_theme().to_dict()


def _get_schedule(handlers, _args):
    return handlers.get_schedule().to_dict()


def _save_cell(handlers, args):
    row = _index_arg(args, "row")
    col = _index_arg(args, "col")
    value = _text_arg(args, "value")
    handlers.save_cell(row, col, value)
    return None


COMMANDS = {
    "get_theme": _get_theme,
    "get_schedule": _get_schedule,
    "save_cell": _save_cell,
}


def dispatch(handlers, request) -> dict:
    """Run one request and build its reply.

    Errors never escape: they come back as ``{"ok": false, "error": text}``.
    """
    if not isinstance(request, dict):
        return {"id": None, "ok": False, "error": "request must be a JSON object"}

    req_id = request.get("id")
    cmd = request.get("cmd")
    args = request.get("args")
    if args is None:
        args = {}

    try:
        fn = COMMANDS.get(cmd) if isinstance(cmd, str) else None
        if fn is None:
            raise BridgeError(f"unknown command: {cmd!r}")
        if not isinstance(args, dict):
            raise BridgeError(f"invalid args for {cmd}: expected an object")
        result = fn(handlers, args)
    except (BridgeError, TimetableError) as exc:
        logger.info("%s failed: %s", cmd, exc)
        return {"id": req_id, "ok": False, "error": str(exc)}

    return {"id": req_id, "ok": True, "result": result}


def serve(handlers, stdin, stdout) -> int:
    """JSON-lines loop: one request per input line, one reply per output line.

    Returns the number of requests handled once input is exhausted.
    """
    handled = 0
    for line in stdin:
        line = line.strip()
        if not line:
            continue
        try:
            request = json.loads(line)
        except json.JSONDecodeError as exc:
            reply = {"id": None, "ok": False, "error": f"malformed request: {exc}"}
        else:
            reply = dispatch(handlers, request)
        stdout.write(json.dumps(reply) + "\n")
        stdout.flush()
        handled += 1
    return handled
