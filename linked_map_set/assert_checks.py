import inspect
import logging


def _get_caller_info(n_back):
  frame = inspect.stack()[n_back + 1][0]
  caller = inspect.getframeinfo(frame)

  return f'{caller.filename}:{caller.lineno}'


def _report_fail(level, op, *args, **kwargs):
  fmsg = kwargs.get('msg')
  cinfo = _get_caller_info(2)
  if fmsg:
    cinfo = f'{cinfo}; {fmsg}'
  if op:
    assert len(args) == 2, len(args)
    msg = f'{args[0]!r} {op} {args[1]!r} failed from {cinfo}'
  else:
    msg = f'Check failed from {cinfo}'

  logging.log(level, msg)

  raise AssertionError(msg)


def check(a, level=logging.ERROR, msg=None):
  if not a:
    _report_fail(level, None, msg=msg)


def check_is_none(a, level=logging.ERROR, msg=None):
  if a is not None:
    _report_fail(level, 'is', a, None, msg=msg)


def check_is_not_none(a, level=logging.ERROR, msg=None):
  if a is None:
    _report_fail(level, 'is not', a, None, msg=msg)


def check_eq(a, b, level=logging.ERROR, msg=None):
  if not (a == b):
    _report_fail(level, '==', a, b, msg=msg)


def check_ne(a, b, level=logging.ERROR, msg=None):
  if not (a != b):
    _report_fail(level, '!=', a, b, msg=msg)

