class _ValueErrorMixin:

  _DEFAULT_FORMAT = 'value {} has an error'

  def _init_value(self, value, message):
    self.value = value
    self.message = message or self._DEFAULT_FORMAT.format(repr(value))

  def __str__(self):
    return self.message


class DuplicateValueError(_ValueErrorMixin, ValueError):

  _DEFAULT_FORMAT = 'value {} is already present'

  def __init__(self, value, message=None):
    self._init_value(value, message)
    super().__init__(self.message)


class MissingValueError(_ValueErrorMixin, KeyError):

  _DEFAULT_FORMAT = 'value {} is not present'

  def __init__(self, value, message=None):
    self._init_value(value, message)
    super().__init__(self.message)

