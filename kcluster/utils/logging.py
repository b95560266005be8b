import logging
from typing import Any, Dict, IO, Optional

LOGGER_NAME = "kcluster"


def setup_logger(
    level: int = logging.INFO,
    stream: Optional[IO[str]] = None,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """
    Настраивает логгер библиотеки (или его дочерний логгер).

    Обработчик добавляется один раз, повторный вызов меняет только
    уровень логгера и его обработчиков.

    :param level: минимальный уровень логирования
    :param stream: поток вывода (по умолчанию ``sys.stderr``)
    :param name: ``"kcluster"`` или дочернее имя вида ``"kcluster.<run>"``
    :return: настроенный экземпляр :class:`logging.Logger`
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        raise ValueError(f"Logger name must be '{LOGGER_NAME}' or its child, got '{name}'")

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
    else:
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(name)s %(levelname)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(handler)

    logger.propagate = False

    return logger


def format_run_prefix(meta: Dict[str, Any]) -> str:
    """
    Префикс для логов одного запуска кластеризации.

    Ожидается словарь с ключами ``N`` (объекты), ``D`` (признаки),
    ``K`` (кластеры) и опциональным ``distance``.
    """
    prefix = f"[N={meta['N']} D={meta['D']} K={meta['K']}"
    if meta.get("distance"):
        prefix += f" distance={meta['distance']}"
    return prefix + "]"
