import os
import yaml


def cname(obj):
  return type(obj).__name__


def getenv(name, dtype=None, defval=None):
  # os.getenv expects the default value to be a string, so cannot be passed in there.
  env = os.getenv(name, None)
  if env is None:
    env = defval
  if env is not None:
    return to_type(env, dtype) if dtype is not None else env


def to_type(v, vtype):
  return vtype(yaml.safe_load(v)) if isinstance(v, str) else vtype(v)
