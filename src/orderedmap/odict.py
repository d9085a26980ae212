# Copyright 2003-2009, BlueDynamics Alliance - http://bluedynamics.com
# GNU General Public License Version 2 or later

import copy
import logging
import operator
from zope.interface import implementer
from orderedmap.interfaces import IOrderedMap
from orderedmap.keyorder import KeyOrder
from orderedmap.store import MapStore
from orderedmap.exceptions import KeyNotFound
from orderedmap.exceptions import IndexOutOfRange
from orderedmap.exceptions import InternalInconsistency

log = logging.getLogger('orderedmap')

_marker = object()

@implementer(IOrderedMap)
class OrderedMap(object):
    """Mapping with an explicit, changeable key order.

    Keys are kept in a ``KeyOrder``, values in a store created by
    ``storefactory``. Both always contain the same keys.

    ``source`` may be another ``OrderedMap``, any mapping or an iterable of
    ``(key, value)`` pairs. Keyword arguments are set afterwards.
    """

    storefactory = MapStore

    def __init__(self, source=None, **kw):
        self._order = KeyOrder()
        self._store = self.storefactory()
        if source is None:
            pass
        elif isinstance(source, OrderedMap):
            self._order = source._order.copy()
            for key in source._order:
                self._store[key] = source._store[key]
        elif hasattr(source, 'keys'):
            self._fromMapping(source)
        else:
            self._fromPairs(source)
        for key, value in kw.items():
            self[key] = value

    @classmethod
    def fromMapping(cls, mapping):
        om = cls()
        om._fromMapping(mapping)
        return om

    @classmethod
    def fromPairs(cls, pairs):
        """Create from iterable of ``(key, value)`` pairs.

        A duplicate key keeps the position of its first occurrence and the
        value of its last one.
        """
        om = cls()
        om._fromPairs(pairs)
        return om

    def _fromMapping(self, mapping):
        log.debug("Reading %i entries from %s.",
                  len(mapping), type(mapping).__name__)
        # mapping iteration yields each key once
        for key in mapping.keys():
            self._order.append(key)
            self._store[key] = mapping[key]

    def _fromPairs(self, pairs):
        try:
            iterator = iter(pairs)
        except TypeError:
            raise TypeError("Expected mapping or iterable of pairs, got %r."
                            % type(pairs).__name__)
        for pair in iterator:
            try:
                key, value = pair
            except (TypeError, ValueError):
                raise TypeError("Expected (key, value) pair, got %r."
                                % (pair,))
            if key in self._store:
                log.debug("Duplicate key %r in pairs, keeping first "
                          "position, overwriting value.", key)
            else:
                self._order.append(key)
            self._store[key] = value

    ###
    # store pass through

    def __len__(self):
        return len(self._store)

    def __contains__(self, key):
        return key in self._store

    def __eq__(self, other):
        if isinstance(other, OrderedMap):
            return self._store == other._store
        if hasattr(other, 'keys'):
            return self._store == dict(other.items())
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.itemList())

    ###
    # read

    def __getitem__(self, key):
        try:
            return self._store[key]
        except KeyError:
            raise KeyNotFound(key)

    def get(self, key, default=None):
        if key in self._store:
            return self._store[key]
        return default

    def __iter__(self):
        return iter(self._order)

    def keys(self):
        return list(self._order)

    def values(self):
        return (value for key, value in self.items())

    def items(self):
        store = self._store
        # keys removed while consuming are skipped
        return ((key, store[key]) for key in self._order[:] if key in store)

    def itemList(self):
        return [(key, self._store[key]) for key in self._order]

    def getAt(self, index):
        key = self._order[index]
        return key, self._store[key]

    ###
    # write

    def __setitem__(self, key, value):
        if key not in self._store:
            self._order.append(key)
        self._store[key] = value

    def setAt(self, index, key, value):
        index = operator.index(index)
        if key in self._store:
            position = self._order.find(key)
            if position == -1:
                log.error("Key %r is stored but has no position.", key)
                raise InternalInconsistency(
                    "Key %r is stored but has no position." % (key,))
            self._order.pop(position)
        self._order.insert(self._order.normalize(index), key)
        self._store[key] = value

    def setdefault(self, key, default=None):
        if key not in self._store:
            self[key] = default
        return self._store[key]

    def update(self, other=(), **kw):
        if isinstance(other, OrderedMap):
            other = other.itemList()
        elif hasattr(other, 'keys'):
            other = [(key, other[key]) for key in other.keys()]
        for key, value in other:
            self[key] = value
        for key, value in kw.items():
            self[key] = value

    ###
    # delete

    def __delitem__(self, key):
        if not self.remove(key):
            raise KeyNotFound(key)

    def remove(self, key):
        position = self._order.find(key)
        if position == -1:
            return False
        self._order.pop(position)
        del self._store[key]
        return True

    def removeAt(self, index):
        try:
            key = self._order.pop(index)
        except IndexOutOfRange:
            return False
        del self._store[key]
        return True

    def pop(self, key, *default):
        if len(default) > 1:
            raise TypeError("pop expected at most 2 arguments, got %i."
                            % (len(default) + 1))
        value = self._store.get(key, _marker)
        if value is _marker:
            if default:
                return default[0]
            raise KeyNotFound(key)
        self.remove(key)
        return value

    def popitem(self, last=True):
        if not self._order:
            raise KeyNotFound('mapping is empty')
        key = self._order.pop(-1 if last else 0)
        value = self._store[key]
        del self._store[key]
        return key, value

    def clear(self):
        self._order.clear()
        self._store.clear()

    ###
    # order

    def sortByKey(self, reverse=False):
        self._order.sort(reverse=reverse)

    def sortBy(self, func, reverse=False):
        store = self._store
        self._order.sort(key=lambda key: func(key, store[key]),
                         reverse=reverse)

    def reverse(self):
        self._order.reverse()

    ###
    # copy

    def copy(self):
        return self.__class__(self)

    __copy__ = copy

    def __deepcopy__(self, memo):
        new = self.__class__()
        memo[id(self)] = new
        for key, value in self.itemList():
            new[copy.deepcopy(key, memo)] = copy.deepcopy(value, memo)
        return new
