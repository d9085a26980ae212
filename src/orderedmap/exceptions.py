# Copyright 2003-2009, BlueDynamics Alliance - http://bluedynamics.com
# GNU General Public License Version 2 or later

class KeyNotFound(KeyError):
    """Raised on key access for a key which is not contained.
    """

class IndexOutOfRange(IndexError):
    """Raised on positional access outside of the key order.
    """

class InternalInconsistency(RuntimeError):
    """Key order and value store went out of sync.

    Never raised through the public API alone. Treat it as a defect.
    """
