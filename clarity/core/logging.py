import logging

LOG_FORMAT = "%(asctime)s %(levelname)s  %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure le logging racine une seule fois (appelé par create_app).
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=numeric, format=LOG_FORMAT)
    root.setLevel(numeric)

    # httpx logue chaque requête en INFO, avec la clé API dans l'URL
    logging.getLogger("httpx").setLevel(logging.WARNING)
