import logging, sys

from issuedb.settings import LOG_LEVEL


def setup_logging(level: str | None = None):
    logger = logging.getLogger()
    if logger.handlers:  # don’t double add during reload or repeated CLI calls
        return
    level = level or LOG_LEVEL
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s :: %(message)s"))
    logger.addHandler(h)
    # SQLAlchemy echoes every statement at INFO; keep it quiet unless asked
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
