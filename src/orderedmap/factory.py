# Copyright 2003-2009, BlueDynamics Alliance - http://bluedynamics.com
# GNU General Public License Version 2 or later

import logging
from zope.interface import implementer
from orderedmap.interfaces import IOrderedMapFactory
from orderedmap.odict import OrderedMap

log = logging.getLogger('orderedmap')

@implementer(IOrderedMapFactory)
class OrderedMapFactory(object):

    mapclass = OrderedMap

    def __call__(self, source=None, **kw):
        if source is None:
            log.debug("Creating empty %s.", self.mapclass.__name__)
            om = self.mapclass()
        elif isinstance(source, OrderedMap):
            log.debug("Copying %s with %i entries.",
                      type(source).__name__, len(source))
            om = self.mapclass(source)
        elif hasattr(source, 'keys'):
            log.debug("Creating from mapping %s.", type(source).__name__)
            om = self.mapclass.fromMapping(source)
        elif isinstance(source, (str, bytes)):
            raise TypeError("Expected mapping or iterable of pairs, got %r."
                            % type(source).__name__)
        else:
            log.debug("Creating from pair sequence.")
            om = self.mapclass.fromPairs(source)
        om.update(**kw)
        return om
