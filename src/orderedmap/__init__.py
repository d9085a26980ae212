# Copyright 2003-2009, BlueDynamics Alliance - http://bluedynamics.com
# GNU General Public License Version 2 or later

from orderedmap.odict import OrderedMap
from orderedmap.keyorder import KeyOrder
from orderedmap.exceptions import KeyNotFound
from orderedmap.exceptions import IndexOutOfRange
from orderedmap.exceptions import InternalInconsistency
from orderedmap.store import MapStore
