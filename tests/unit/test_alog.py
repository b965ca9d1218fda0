import logging
import unittest

from linked_map_set import alog


def make_record(msg, args=(), level=logging.INFO):
  return logging.LogRecord('test', level, '/some/path/mymod.py', 10, msg, args, None)


class FormatterTests(unittest.TestCase):

  def test_header(self):
    line = alog.Formatter().format(make_record('hello %s', ('world',)))
    self.assertTrue(line.startswith('IN'))
    self.assertTrue(line.endswith(';mymod: hello world'))

  def test_multiline(self):
    lines = alog.Formatter().format(make_record('one\ntwo', level=logging.WARNING)).split('\n')
    self.assertEqual(len(lines), 2)
    for line, text in zip(lines, ('one', 'two')):
      self.assertTrue(line.startswith('WA'))
      self.assertTrue(line.endswith(f': {text}'))

  def test_spam_level_id(self):
    line = alog.Formatter().format(make_record('x', level=alog.SPAM))
    self.assertTrue(line.startswith('SP'))


class SetupTests(unittest.TestCase):

  def tearDown(self):
    alog.set_current_level(alog.DEBUG, set_logger=False)

  def test_basic_setup(self):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
      alog.basic_setup(log_level='SPAM', log_file='STDERR')
      self.assertEqual(logging.getLevelName(alog.SPAM), 'SPAM')
      self.assertEqual(root.level, alog.SPAM)
      self.assertTrue(any(isinstance(h.formatter, alog.Formatter) for h in root.handlers))
    finally:
      for handler in list(root.handlers):
        root.removeHandler(handler)
      for handler in saved_handlers:
        root.addHandler(handler)
      root.setLevel(saved_level)

  def test_spam_is_dropped_below_current_level(self):
    alog.set_current_level(alog.DEBUG, set_logger=False)
    with self.assertLogs(level=alog.SPAM) as cm:
      alog.spam('dropped')
      alog.debug('kept %d', 1)

    self.assertEqual(len(cm.output), 1)
    self.assertIn('kept 1', cm.output[0])

  def test_xraise(self):
    with self.assertRaises(ValueError) as cm:
      alog.xraise(ValueError, 'bad value')
    self.assertEqual(str(cm.exception), 'bad value')


if __name__ == '__main__':
  unittest.main()
