""" Worker identity generation. An identity is an opaque run of random
    bytes chosen once per worker; the ROUTER side uses it to route replies.
    Uniqueness is probabilistic and collisions are not detected.
"""

import os


LENGTH = 10

# ZeroMQ reserves identities that begin with a zero byte, and caps the
# length at 255 bytes.
MAXIMUM = 255


def generate(length=LENGTH, randbytes=os.urandom):
    """ Return a new identity of *length* random bytes. The first byte is
        never zero.
    """

    length = int(length)
    if length < 1 or length > MAXIMUM:
        raise ValueError('identity length must be 1..%d, not %d' % (MAXIMUM, length))

    identity = randbytes(length)

    while identity[0] == 0:
        identity = randbytes(1) + identity[1:]

    return identity


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
