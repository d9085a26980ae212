# Copyright 2003-2009, BlueDynamics Alliance - http://bluedynamics.com
# GNU General Public License Version 2 or later

from zope.interface import implementer
from orderedmap.interfaces import IMapStore

@implementer(IMapStore)
class MapStore(dict):
    """Default value store of ``OrderedMap``.
    """
