import logging, json, sys, time, os

FORMAT = json.dumps({
    "ts": "%(asctime)s",
    "level": "%(levelname)s",
    "name": "%(name)s",
    "msg": "%(message)s"
})


def _formatter() -> logging.Formatter:
    formatter = logging.Formatter(fmt=FORMAT, datefmt="%Y-%m-%dT%H:%M:%SZ")
    formatter.converter = time.gmtime  # UTC timestamps
    return formatter


def get_logger(name="relinstall", level=logging.INFO, to_file=None):
    """Structured JSON-line logger shared by every installer component."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_formatter())
        logger.addHandler(handler)

        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(_formatter())
            logger.addHandler(file_handler)

    return logger


def configure_logging(cfg) -> None:
    """Apply an InstallerConfig's level and log file to every relinstall logger."""
    file_handler = None
    if cfg.log_file:
        os.makedirs(os.path.dirname(cfg.log_file) or ".", exist_ok=True)
        file_handler = logging.FileHandler(cfg.log_file)
        file_handler.setFormatter(_formatter())

    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        if name != "relinstall" and not name.startswith("relinstall."):
            continue
        logger.setLevel(cfg.level)
        if file_handler and file_handler not in logger.handlers:
            logger.addHandler(file_handler)
