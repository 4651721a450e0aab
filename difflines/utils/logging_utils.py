import logging
import os

# Shared "DIFFLINES" logger for the parser, the CLI and the HTTP routes

LOG_LEVEL_ENV = 'DIFFLINES_LOG_LEVEL'


def get_log_level(default='INFO'):
   return os.environ.get(LOG_LEVEL_ENV, default).upper()


def get_logger():
   logger = logging.getLogger("DIFFLINES")

   # Re-importing must not stack handlers
   logger.handlers.clear()

   # The routes log through the same name; keep records out of the root logger
   logger.propagate = False

   formatter = logging.Formatter("\033[36mDIFFLINES\033[0m: %(levelname)-8s %(message)s")
   handler = logging.StreamHandler()
   handler.setFormatter(formatter)
   logger.addHandler(handler)

   logger.setLevel(get_log_level())
   return logger


def configure_server_logging():
   """Keep uvicorn quiet for `difflines serve` unless debugging"""
   if get_log_level() != 'DEBUG':
       logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
       logging.getLogger('uvicorn.error').setLevel(logging.WARNING)


logger = get_logger()
