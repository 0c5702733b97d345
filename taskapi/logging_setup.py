import logging
import sys
from pathlib import Path


class _ThirdPartyNoiseFilter(logging.Filter):
    """Keep our own logs, only let other libraries through at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("taskapi"):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level="INFO", log_dir=None) -> None:
    """
    Configure the root logger:
    - console handler on stderr, filtered
    - file handler with everything when ``log_dir`` is set

    Call once, from the app factory.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.getLevelName(str(level).upper()))
    ch.setFormatter(fmt)
    ch.addFilter(_ThirdPartyNoiseFilter())
    root.addHandler(ch)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "taskapi.log"), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
