# Copyright 2003-2009, BlueDynamics Alliance - http://bluedynamics.com
# GNU General Public License Version 2 or later

from zope.interface import implementer
from orderedmap.interfaces import IKeyOrder
from orderedmap.exceptions import IndexOutOfRange

@implementer(IKeyOrder)
class KeyOrder(object):
    """List of keys refusing duplicates.

    Membership is checked by linear scan, the owning map is expected to
    check its store first where speed matters.
    """

    def __init__(self, keys=()):
        self._keys = []
        for key in keys:
            self.append(key)

    def __len__(self):
        return len(self._keys)

    def __iter__(self):
        return iter(self._keys)

    def __contains__(self, key):
        return key in self._keys

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._keys[index]
        try:
            return self._keys[index]
        except IndexError:
            raise IndexOutOfRange(index)

    def __eq__(self, other):
        if isinstance(other, KeyOrder):
            return self._keys == other._keys
        if isinstance(other, (list, tuple)):
            return self._keys == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self._keys)

    def normalize(self, index):
        if index < 0:
            return len(self._keys) + index
        return index

    def find(self, key):
        try:
            return self._keys.index(key)
        except ValueError:
            return -1

    def append(self, key):
        if key in self._keys:
            raise ValueError("Duplicate key %r." % (key,))
        self._keys.append(key)

    def insert(self, index, key):
        if key in self._keys:
            raise ValueError("Duplicate key %r." % (key,))
        if index < 0:
            index = 0
        # list.insert appends for indices beyond the end
        self._keys.insert(index, key)

    def pop(self, index):
        normalized = self.normalize(index)
        if normalized < 0 or normalized >= len(self._keys):
            raise IndexOutOfRange(index)
        return self._keys.pop(normalized)

    def sort(self, key=None, reverse=False):
        self._keys.sort(key=key, reverse=reverse)

    def reverse(self):
        self._keys.reverse()

    def copy(self):
        new = self.__class__()
        new._keys = self._keys[:]
        return new

    def clear(self):
        self._keys = []
