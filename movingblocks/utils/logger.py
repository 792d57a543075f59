# movingblocks/utils/logger.py
# ---------------------------------------------------------------
# Общий логгер пакета. Сообщения пишутся с префиксом «[Компонент]».
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("MovingBlocks")

logger = init_logger()
