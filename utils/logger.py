"""Logging configuration shared by the app and its components."""

import logging

from config.settings import settings

ROOT_LOGGER_NAME = "chatvez"

_configured = False


def resolve_level(name: str) -> int:
  """Map a level name to its number, falling back to INFO for unknown names."""
  level = logging.getLevelName(str(name).upper())
  return level if isinstance(level, int) else logging.INFO


def configure_logging() -> logging.Logger:
  """
  Attach file and console handlers to the application logger.

  Streamlit re-executes the script on every interaction, so handlers are
  added only on the first call in a process.
  """
  global _configured

  root = logging.getLogger(ROOT_LOGGER_NAME)
  if _configured:
    return root

  level = resolve_level(settings.logging.level)
  root.setLevel(level)
  root.propagate = False

  log_dir = settings.logging.log_dir
  log_dir.mkdir(parents=True, exist_ok=True)

  file_handler = logging.FileHandler(
      log_dir / settings.logging.log_file, mode="a", encoding="utf-8"
  )
  file_handler.setLevel(logging.DEBUG)
  file_handler.setFormatter(
      logging.Formatter(
          "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
          datefmt="%Y-%m-%d %H:%M:%S",
      )
  )
  root.addHandler(file_handler)

  console_handler = logging.StreamHandler()
  console_handler.setLevel(logging.INFO)
  console_handler.setFormatter(logging.Formatter("💬 %(message)s"))
  root.addHandler(console_handler)

  if not isinstance(logging.getLevelName(str(settings.logging.level).upper()), int):
    root.warning("Unknown log level %r, using INFO", settings.logging.level)

  _configured = True
  return root


def get_logger(name: str) -> logging.Logger:
  """Return a child of the application logger, configuring it if needed."""
  configure_logging()
  return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
