import logging
import os
import sys
import time
import types


DEBUG = logging.DEBUG
SPAM = DEBUG - 2

_LEVEL_IDS = {
  SPAM: 'SP',
  DEBUG: 'DD',
  logging.INFO: 'IN',
  logging.WARNING: 'WA',
  logging.ERROR: 'ER',
  logging.CRITICAL: 'CR',
}


class Formatter(logging.Formatter):

  def format(self, r):
    created = time.localtime(r.created)
    lid = _LEVEL_IDS.get(r.levelno, r.levelname[:2])
    hdr = (f'{lid}{time.strftime("%Y%m%d %H:%M:%S", created)}.{r.msecs * 1000:06.0f}'
           f';{os.getpid()};{r.module}')

    return '\n'.join(f'{hdr}: {ln}' for ln in r.getMessage().split('\n'))


def _stream_handler(target):
  if target == 'STDOUT':
    return logging.StreamHandler(sys.stdout)
  if target == 'STDERR':
    return logging.StreamHandler(sys.stderr)

  return logging.FileHandler(target, mode='a')


def setup_logging(args):
  logging.addLevelName(SPAM, 'SPAM')

  level = logging.getLevelName(args.log_level.upper())
  handlers = []
  for target in filter(None, args.log_file.split(',')):
    handler = _stream_handler(target)
    handler.setLevel(level)
    handler.setFormatter(Formatter())
    handlers.append(handler)

  logging.basicConfig(level=level, handlers=handlers, force=True)

  set_current_level(level, set_logger=False)


def basic_setup(**kwargs):
  args = dict(log_level=os.getenv('LOG_LEVEL', 'INFO'),
              log_file=os.getenv('LOG_FILE', 'STDERR'))
  args.update(kwargs)
  setup_logging(types.SimpleNamespace(**args))


# Messages below this level are dropped before reaching the logging module.
_LEVEL = DEBUG

def set_current_level(level, set_logger=True):
  global _LEVEL

  _LEVEL = level
  if set_logger:
    logger = logging.getLogger()
    logger.setLevel(level)
    for handler in logger.handlers:
      handler.setLevel(level)


def _log(level, msg, args, kwargs):
  # Skip _log() and its public wrapper, so records point at the caller.
  kwargs['stacklevel'] = kwargs.get('stacklevel', 1) + 2
  logging.log(level, msg, *args, **kwargs)


def spam(msg, *args, **kwargs):
  if SPAM >= _LEVEL:
    _log(SPAM, msg, args, kwargs)


def debug(msg, *args, **kwargs):
  if DEBUG >= _LEVEL:
    _log(DEBUG, msg, args, kwargs)


def xraise(e, msg):
  debug('%s: %s', e.__name__, msg, stacklevel=2)

  raise e(msg)
