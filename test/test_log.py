from logging.handlers import RotatingFileHandler
from pagamento_pix.log import configurar_logging
import logging


def test_configurar_logging_nao_duplica_handlers():
    configurar_logging()
    antes = len(logging.getLogger().handlers)

    configurar_logging()

    assert len(logging.getLogger().handlers) == antes
    assert any(isinstance(h, RotatingFileHandler)
               for h in logging.getLogger().handlers)
