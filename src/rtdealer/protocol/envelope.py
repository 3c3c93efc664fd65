""" A class representation of an addressed message: the peer identity it
    came from (or is going to) and the payload it carries. The empty
    delimiter frame is implied; it is added and checked by the framing
    layer, not stored here.
"""

from . import fields


class Envelope:
    """ The :class:`Envelope` is the unit of exchange on the broker side.
        *peer* is the identity the transport attached on receipt, and must
        be handed back unchanged on the reply so it routes to the right
        worker. *payload* is the single body frame.
    """

    __slots__ = ('peer', 'payload')

    def __init__(self, peer, payload):
        self.peer = peer
        self.payload = payload


    def __eq__(self, other):
        if not isinstance(other, Envelope):
            return NotImplemented
        return self.peer == other.peer and self.payload == other.payload


    def __repr__(self):
        return 'Envelope(%r, %r)' % (self.peer, self.payload)


    def reply(self, payload):
        """ Return a new :class:`Envelope` addressed back to the sender of
            this one.
        """

        return Envelope(self.peer, payload)


    @property
    def fired(self):
        return self.payload == fields.FIRED


# end of class Envelope


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
