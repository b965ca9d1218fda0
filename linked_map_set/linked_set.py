from . import alog
from . import assert_checks as tas
from . import env_config as ec
from . import errors as err
from . import utils as ut


class Node:

  __slots__ = ('value', 'previous', 'next')

  def __init__(self, value, previous=None, next=None):
    self.value = value
    self.previous = previous
    self.next = next

  def clone(self):
    return Node(self.value, previous=self.previous, next=self.next)

  def __eq__(self, other):
    if not isinstance(other, Node):
      return NotImplemented

    return (self.value == other.value and self.previous == other.previous and
            self.next == other.next)

  __hash__ = None

  def __repr__(self):
    return f'Node(value={self.value!r}, previous={self.previous!r}, next={self.next!r})'


class LinkedSet:
  """Set of unique values which remembers the order in which they were added.

  The items dictionary maps each value to its Node, and the nodes link to
  their neighbours by value, so membership and removal are dictionary lookups
  while iteration follows the links from head to tail.
  Adding a value which is already present moves it to the tail.
  All mutating APIs work in place and return the set itself, so they can be
  chained. Use copy() to keep a snapshot around.
  """

  def __init__(self, init=None, check_invariants=None):
    if check_invariants is None:
      check_invariants = ec.get_config().check_invariants

    self.items = dict()
    self._head = None
    self._tail = None
    self._check = check_invariants
    self._version = 0

    for value in init or ():
      self.add(value)

  @property
  def head(self):
    return self._head

  @property
  def tail(self):
    return self._tail

  def add(self, value):
    """Appends value, or moves it to the tail if already present."""
    self._check_value(value)
    present = value in self.items
    if self._head is None:
      self.items[value] = Node(value)
      self._head = self._tail = value
    elif present and value == self._tail:
      # Covers the single item case as well, and re-adding the tail is a no-op.
      return self
    else:
      if present:
        alog.spam('Moving %r to the tail', value)
        self._unlink(value)

      self._append(value)

    return self._mutated()

  def add_new(self, value):
    if value in self.items:
      return self

    return self.add(value)

  def add_new_strict(self, value):
    if value in self.items:
      alog.debug('Value %r is already present', value)
      raise err.DuplicateValueError(value)

    return self.add(value)

  def remove(self, value):
    if value in self.items:
      self._unlink(value)
      self._mutated()

    return self

  def remove_strict(self, value):
    if value not in self.items:
      alog.debug('Value %r is not present', value)
      raise err.MissingValueError(value)

    return self.remove(value)

  def size(self):
    return len(self.items)

  def member(self, value):
    return value in self.items

  def to_list(self):
    return list(self)

  def copy(self):
    nls = LinkedSet(check_invariants=self._check)
    nls.items = {value: node.clone() for value, node in self.items.items()}
    nls._head = self._head
    nls._tail = self._tail

    return nls

  def check_invariants(self):
    if not self.items:
      tas.check_is_none(self._head, msg='Empty set with a head')
      tas.check_is_none(self._tail, msg='Empty set with a tail')
      return

    head_node = self.items.get(self._head)
    tail_node = self.items.get(self._tail)
    tas.check_is_not_none(head_node, msg=f'Head {self._head!r} not in the index')
    tas.check_is_not_none(tail_node, msg=f'Tail {self._tail!r} not in the index')
    tas.check_is_none(head_node.previous, msg='Head node has a previous link')
    tas.check_is_none(tail_node.next, msg='Tail node has a next link')
    if len(self.items) == 1:
      tas.check_eq(self._head, self._tail, msg='Single item set')
    else:
      tas.check_ne(self._head, self._tail, msg='Multiple items set')

    seen, previous, value = set(), None, self._head
    while value is not None:
      tas.check(value not in seen, msg=f'Cycle at {value!r}')
      node = self.items.get(value)
      tas.check_is_not_none(node, msg=f'Dangling link to {value!r}')
      tas.check_eq(node.value, value, msg='Node stored under a different value')
      tas.check_eq(node.previous, previous, msg=f'Broken previous link at {value!r}')
      seen.add(value)
      previous, value = value, node.next

    tas.check_eq(previous, self._tail, msg='Chain does not end at the tail')
    tas.check_eq(len(seen), len(self.items), msg='Nodes not reachable from the head')

  def _check_value(self, value):
    if value is None:
      alog.xraise(ValueError, f'{ut.cname(self)} cannot hold None values')

  def _append(self, value):
    alog.spam('Appending %r after %r', value, self._tail)
    self.items[value] = Node(value, previous=self._tail)
    self.items[self._tail].next = value
    self._tail = value

  def _unlink(self, value):
    node = self.items.pop(value)
    if node.previous is None and node.next is None:
      self._head = self._tail = None
    elif node.previous is None:
      alog.spam('Removing head %r', value)
      next_node = self.items[node.next]
      next_node.previous = None
      self._head = next_node.value
    elif node.next is None:
      alog.spam('Removing tail %r', value)
      prev_node = self.items[node.previous]
      prev_node.next = None
      self._tail = prev_node.value
    else:
      alog.spam('Removing %r between %r and %r', value, node.previous, node.next)
      prev_node = self.items[node.previous]
      next_node = self.items[node.next]
      prev_node.next = next_node.value
      next_node.previous = prev_node.value

  def _mutated(self):
    self._version += 1
    if self._check:
      self.check_invariants()

    return self

  def __len__(self):
    return len(self.items)

  def __contains__(self, value):
    return value in self.items

  def __iter__(self):
    version, value = self._version, self._head
    while value is not None:
      node = self.items[value]
      yield node.value
      if version != self._version:
        raise RuntimeError(f'{ut.cname(self)} changed during iteration')

      value = node.next

  def __copy__(self):
    return self.copy()

  def __eq__(self, other):
    if not isinstance(other, LinkedSet):
      return NotImplemented

    return (self._head == other._head and self._tail == other._tail and
            self.items == other.items)

  __hash__ = None

  def __repr__(self):
    return f'{ut.cname(self)}({self.to_list()!r})'
