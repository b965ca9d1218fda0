import argparse

from . import utils as ut


class EnvConfig:
  """Configuration object whose public class attributes are the defaults.

  Each attribute NAME can be overridden by the ${_ENV_PREFIX}NAME environment
  variable (upper cased), and then by a --NAME command line option when an
  argv list is passed in.
  """

  _ENV_PREFIX = ''

  def __init__(self, argv=None):
    parser = argparse.ArgumentParser(add_help=False)
    state = dict()
    for name in dir(self):
      if not name.startswith('_'):
        value = getattr(self, name)
        # Methods are not configuration values.
        if not callable(value):
          env = ut.getenv(self._env_name(name), dtype=type(value))
          if env is not None:
            value = env

          parser.add_argument(f'--{name}', type=lambda v, t=type(value): ut.to_type(v, t))
          state[name] = value

    args = None
    if argv is not None:
      args, _ = parser.parse_known_args(argv)
    for name, value in state.items():
      avalue = getattr(args, name, None)
      setattr(self, name, value if avalue is None else avalue)

  def _env_name(self, name):
    return f'{self._ENV_PREFIX}{name.upper()}'


class LinkedSetConfig(EnvConfig):

  _ENV_PREFIX = 'LINKED_SET_'

  check_invariants = False


_CONFIG = None

def get_config():
  global _CONFIG

  if _CONFIG is None:
    _CONFIG = LinkedSetConfig()

  return _CONFIG


def reset_config():
  global _CONFIG

  _CONFIG = None

