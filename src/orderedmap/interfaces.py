# Copyright 2003-2009, BlueDynamics Alliance - http://bluedynamics.com
# GNU General Public License Version 2 or later

from zope.interface import Interface
from zope.interface import Attribute
from zope.interface.common.mapping import IEnumerableMapping
from zope.interface.common.mapping import IWriteMapping
from zope.interface.common.mapping import IClonableMapping

###############################################################################
# Storage
###############################################################################

class IMapStore(IEnumerableMapping, IWriteMapping):
    """Host key -> value store an ``IOrderedMap`` keeps its values in.

    Iteration yields each key once, in an order the store defines itself.
    Equality is compared against another store.
    """

    def clear():
        """Remove all entries.
        """

class IKeyOrder(Interface):
    """Ordered sequence of keys without duplicates.
    """

    def __len__():
        """Number of keys.
        """

    def __iter__():
        """Iterate keys in order.
        """

    def __contains__(key):
        """Membership test, linear.
        """

    def __getitem__(index):
        """Key at integer position. Negative positions count from the end.
        """

    def normalize(index):
        """Translate a negative index to its non negative counterpart.

        Indices >= 0 are returned unchanged, no range check is done.
        """

    def find(key):
        """Return position of key or -1.
        """

    def append(key):
        """Add key at the end.

        Raise ``ValueError`` if key is already contained.
        """

    def insert(index, key):
        """Insert key before ``index``.

        ``index`` is expected to be normalized. Indices below 0 insert at
        the front, indices at or beyond the length append. Raise
        ``ValueError`` if key is already contained.
        """

    def pop(index):
        """Remove and return key at position.

        Raise ``orderedmap.exceptions.IndexOutOfRange`` if out of range.
        """

    def sort(key=None, reverse=False):
        """Sort keys in place.
        """

    def reverse():
        """Reverse keys in place.
        """

    def copy():
        """Return an independent ``IKeyOrder`` with the same keys.
        """

    def clear():
        """Remove all keys.
        """

###############################################################################
# Ordered map
###############################################################################

class IOrderedMap(IEnumerableMapping, IWriteMapping, IClonableMapping):
    """Mapping remembering an explicit order of its keys.

    ``__iter__``, ``keys``, ``values`` and ``items`` follow the key order.
    ``__getitem__`` and ``__delitem__`` raise
    ``orderedmap.exceptions.KeyNotFound`` for missing keys.
    """

    storefactory = Attribute(u"Callable creating an empty ``IMapStore``.")

    def itemList():
        """Return list of ``(key, value)`` tuples in order.
        """

    def getAt(index):
        """Return ``(key, value)`` tuple at position.

        Negative indices count from the end. Raise
        ``orderedmap.exceptions.IndexOutOfRange`` if out of range.
        """

    def setAt(index, key, value):
        """Insert or move key to position and set its value.

        An already contained key is moved, never duplicated. Negative
        indices are resolved after the move removal. Out of range indices
        are clamped to front or end.
        """

    def remove(key):
        """Remove entry by key.

        Return ``True`` if removed, ``False`` if key was not contained.
        """

    def removeAt(index):
        """Remove entry by position.

        Return ``True`` if removed, ``False`` if index was out of range.
        """

    def clear():
        """Remove all entries.
        """

    def update(other=(), **kw):
        """Set all entries of a mapping or pair sequence, then keywords.
        """

    def setdefault(key, default=None):
        """Set key to default if not contained, return contained value.
        """

    def pop(key, *default):
        """Remove key and return its value.

        Return default if given and key not contained, otherwise raise
        ``orderedmap.exceptions.KeyNotFound``.
        """

    def popitem(last=True):
        """Remove and return last or first ``(key, value)`` tuple.
        """

    def sortByKey(reverse=False):
        """Sort entries by key.
        """

    def sortBy(func, reverse=False):
        """Sort entries by ``func(key, value)``.
        """

    def reverse():
        """Reverse order of entries.
        """

###############################################################################
# Factories
###############################################################################

class IOrderedMapFactory(Interface):
    """Factory for ``IOrderedMap`` implementing instances.
    """

    def __call__(source=None, **kw):
        """Create and return ``IOrderedMap`` implementing instance.

        @param source: ``None``, an ``IOrderedMap``, a mapping or an
                       iterable of ``(key, value)`` pairs.
        @param kw: additional entries, set after source.
        """
