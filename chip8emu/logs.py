# Instruction tracing. Off by default, flipped at runtime (F1 in the window).

import logging

logger = logging.getLogger("chip8emu")

logsOn = False


def set_logs(on):
    global logsOn
    logsOn = bool(on)
    # only print ourselves when the application has not configured logging
    if logsOn and not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(logging.DEBUG if logsOn else logging.WARNING)


def toggle_logs():
    set_logs(not logsOn)
    logger.warning("logsOn: %s", logsOn)
    return logsOn


def log(*args):
    if logsOn:
        logger.debug(" ".join(str(a) for a in args))
