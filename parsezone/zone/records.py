# -*- test-case-name: parsezone.test.test_grammar -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
The row produced by parsing one zone file line.

Resource data is represented with the record classes of
L{twisted.names.dns}; only the owner name, TTL and class need a type of
their own, because any of them may be missing from a line.
"""

from twisted.names import dns
from twisted.python import util as tputil


# Zone file classes.  ANY is a query class and never appears in a zone file.
CLASSES = {
    'IN': dns.IN,
    'CS': dns.CS,
    'CH': dns.CH,
    'HS': dns.HS,
}

# Supported record types, in the order they are documented.
RECORD_TYPES = ('A', 'AAAA', 'NS', 'CNAME', 'PTR', 'MX', 'SOA')


def _className(cls):
    if cls is None:
        return 'None'
    return dns.QUERY_CLASSES.get(cls, 'UNKNOWN (%d)' % (cls,))



class Row(tputil.FancyEqMixin, tputil.FancyStrMixin):
    """
    One parsed resource record line.

    Everything but C{resource} may be L{None}: a zone file lets a record
    inherit its owner, TTL and class from the records before it, and that
    is for the caller to resolve.

    @ivar name: The owner name exactly as written, or L{None}.
    @type name: L{str}

    @ivar ttl: The TTL in whole seconds, or L{None}.
    @type ttl: L{int}

    @ivar cls: One of the class constants of L{twisted.names.dns}, or
        L{None}.
    @type cls: L{int}

    @ivar resource: The resource data; an instance of one of the
        C{Record_*} classes of L{twisted.names.dns}.
    """
    fancybasename = 'Row'
    compareAttributes = ('name', 'ttl', 'cls', 'resource')
    showAttributes = ('name', 'ttl', ('cls', _className), 'resource')

    def __init__(self, resource, name=None, ttl=None, cls=None):
        self.name = name
        self.ttl = ttl
        self.cls = cls
        self.resource = resource


    def __hash__(self):
        return hash((self.name, self.ttl, self.cls, self.resource))
