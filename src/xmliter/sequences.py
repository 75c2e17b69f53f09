"""Lazy, re-iterable sequences over node collections.

Every view in this module is restartable: each ``iter()`` call starts a new
traversal at the first element.  Nothing is computed before an element is
requested::

    >>> from xmliter.sequences import nodes
    >>> seq = nodes([1, 2, 3, 4]).filter(lambda n: n % 2 == 0).map(str)
    >>> list(seq)
    ['2', '4']
    >>> list(seq)
    ['2', '4']

Filtered sequences hand out cursors that separate the "is there another
element" question from fetching it::

    >>> cursor = iter(nodes([1, 2, 3]).filter(lambda n: n > 1))
    >>> cursor.has_next()
    True
    >>> cursor.next()
    2
    >>> cursor.next()
    Traceback (most recent call last):
      ...
    xmliter.errors.InvalidSequenceState: next() called without a preceding successful has_next()
"""

from xmliter.errors import InvalidSequenceState

__all__ = ['LazySequence', 'NodeSequence', 'MappedSequence',
           'FilteredSequence', 'FilterCursor', 'nodes', 'mapped', 'filtered']


class LazySequence(object):
    """Base class of the re-iterable views.
    """
    def __iter__(self):
        raise NotImplementedError

    def map(self, transform):
        return mapped(self, transform)

    def filter(self, predicate):
        return filtered(self, predicate)

    def first(self, default=None):
        for item in self:
            return item
        return default

    def is_empty(self):
        for _ in self:
            return False
        return True

    def __bool__(self):
        return not self.is_empty()

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, hex(abs(id(self)))[2:])


class NodeSequence(LazySequence):
    """Sequence view of a fixed-length indexed collection.

    The collection only needs to support ``len()`` and integer indexing,
    which covers lxml elements (their children), XPath result lists and
    plain lists.  The length is read once, here; later changes to the
    collection are not tracked.
    """
    def __init__(self, collection):
        self._collection = collection
        self._length = len(collection)

    def __len__(self):
        return self._length

    def __bool__(self):
        return self._length > 0

    def __getitem__(self, index):
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("sequence index out of range")
        return self._collection[index]

    def __iter__(self):
        collection = self._collection
        for index in range(self._length):
            yield collection[index]


class MappedSequence(LazySequence):
    """Applies ``transform`` to each element as it is requested.
    """
    def __init__(self, source, transform):
        self.source = source
        self.transform = transform

    def __iter__(self):
        transform = self.transform
        for item in self.source:
            yield transform(item)

    def __len__(self):
        return len(self.source)

    def __bool__(self):
        return bool(self.source)

    def __getitem__(self, index):
        return self.transform(self.source[index])


class FilterCursor(object):
    """Single-pass cursor with a one-element lookahead slot.

    ``has_next()`` moves the underlying iterator forward until it finds an
    accepted element and buffers it.  ``next()`` hands out the buffered
    element and empties the slot.
    """
    _UNPRIMED, _PRIMED, _EXHAUSTED = range(3)

    def __init__(self, iterator, predicate):
        self._iterator = iterator
        self._predicate = predicate
        self._state = self._UNPRIMED
        self._slot = None

    def has_next(self):
        if self._state == self._UNPRIMED:
            predicate = self._predicate
            for candidate in self._iterator:
                if predicate(candidate):
                    self._slot = candidate
                    self._state = self._PRIMED
                    break
            else:
                self._state = self._EXHAUSTED
        return self._state == self._PRIMED

    def next(self):
        if self._state != self._PRIMED:
            raise InvalidSequenceState(
                "next() called without a preceding successful has_next()")
        item = self._slot
        self._slot = None
        self._state = self._UNPRIMED
        return item

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        return self.next()


class FilteredSequence(LazySequence):
    """Elements of ``source`` for which ``predicate`` holds, in order.
    """
    def __init__(self, source, predicate):
        self.source = source
        self.predicate = predicate

    def __iter__(self):
        return FilterCursor(iter(self.source), self.predicate)


def nodes(collection):
    """Wrap an indexed collection as a `NodeSequence`.

    Views pass through unchanged.
    """
    if isinstance(collection, LazySequence):
        return collection
    return NodeSequence(collection)


def _compose(inner, outer):
    def transform(item):
        return outer(inner(item))
    return transform


def mapped(sequence, transform):
    """Lazy view applying ``transform`` to each element of ``sequence``.

    Mapping over a `MappedSequence` fuses both transforms into one view.
    """
    if isinstance(sequence, MappedSequence):
        return MappedSequence(sequence.source,
                              _compose(sequence.transform, transform))
    return MappedSequence(sequence, transform)


def filtered(sequence, predicate):
    """Lazy view of the elements of ``sequence`` accepted by ``predicate``.
    """
    return FilteredSequence(sequence, predicate)
