# -*- test-case-name: parsezone.test.test_grammar -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Grammar for a single resource record line of a zone file::

    [<domain>] [<ttl>] [<class>] <type> <RDATA>
    [<domain>] [<class>] [<ttl>] <type> <RDATA>

See U{RFC 1035 section 5<https://datatracker.ietf.org/doc/html/rfc1035#section-5>}.

The grammar runs over the tokens of the line, not its characters; every
C{anything} is one L{Token}.
"""

import socket

from parsley import makeGrammar
from twisted.names import dns

from parsezone.zone import diagnostics
from parsezone.zone.errors import (
    GrammarError, IncompleteInputError, ResidualInputError)
from parsezone.zone.records import CLASSES, RECORD_TYPES, Row
from parsezone.zone.tokengrammar import Mismatch, TokenGrammar
from parsezone.zone.tokens import COMMENT, NEWLINE, WHITESPACE, WORD


grammarSource = r"""
word = anything:t ?(t.kind == WORD) -> t.text
     | expected('word')
string = word
space = anything:t ?(t.kind == WHITESPACE) -> None
      | expected('whitespace')

# Separators that may be missing; not matching them is no failure.
blank = anything:t ?(t.kind == WHITESPACE)
comment = anything:t ?(t.kind == COMMENT)
newline = anything:t ?(t.kind == NEWLINE)

domain = position:p word:text -> self.convert(p, domainName, text)
integer :bits = position:p word:text -> self.convert(p, unsigned, text, bits)
duration = integer(32)
ttlSpace = duration:ttl space -> ttl
classKeyword = anything:t ?(t.kind == WORD and t.text in self.classes)
                 -> self.classes[t.text]
             | expected(self.classChoice())
classSpace = classKeyword:cls space -> cls
ipv4 = position:p word:text -> self.convert(p, address, AF_INET, text)
ipv6 = position:p word:text -> self.convert(p, address, AF_INET6, text)

recordType = anything:t ?(t.kind == WORD and t.text in self.recordTypes)
               -> t.text
           | expected('resource type')
rdata = recordType:t space payload(t):r -> r

payload 'A' = ipv4:address -> A(address)
payload 'AAAA' = ipv6:address -> AAAA(address)
payload 'NS' = domain:name -> NS(encodeName(name))
payload 'CNAME' = domain:name -> CNAME(encodeName(name))
payload 'PTR' = domain:name -> PTR(encodeName(name))
payload 'MX' = integer(16):preference space domain:exchange
               -> MX(preference, encodeName(exchange))
payload 'SOA' = domain:mname space string:rname space integer(32):serial
                space duration:refresh space duration:retry
                space duration:expire space duration:minimum
                -> SOA(mname=encodeName(mname), rname=rname.encode('utf-8'),
                       serial=serial, refresh=refresh, retry=retry,
                       expire=expire, minimum=minimum)

ttlAndClass = ttlSpace:ttl classSpace:cls -> (ttl, cls)
            | classSpace:cls ttlSpace:ttl -> (ttl, cls)

# Once the leading fields leave no other reading, the RDATA must match.
committed = rdata
          | !(self.commit())

# Tried in this order; the first that matches wins.
shape = domain:name space ttlAndClass:tc committed:r
          -> Row(r, name, tc[0], tc[1])
      | domain:name space ttlSpace:ttl rdata:r -> Row(r, name, ttl)
      | domain:name space classSpace:cls rdata:r -> Row(r, name, cls=cls)
      | domain:name space rdata:r -> Row(r, name)
      | ttlAndClass:tc rdata:r -> Row(r, ttl=tc[0], cls=tc[1])
      | ttlSpace:ttl committed:r -> Row(r, ttl=ttl)
      | classSpace:cls rdata:r -> Row(r, cls=cls)
      | rdata:r -> Row(r)

lineEnd = blank* comment? newline?
row = blank* shape:r lineEnd -> r
"""



def domainName(text):
    """
    Check that a word looks like a domain name.
    """
    # TODO: tighten to RFC 1035 label syntax once escapes ("\.") are decoded.
    if not all('!' <= c <= '~' for c in text):
        raise ValueError("%r is not printable ASCII" % (text,))
    return text



def unsigned(text, bits):
    """
    Parse a base 10 unsigned integer that fits in C{bits} bits.  Durations
    are whole seconds; unit suffixes such as C{1d} are not supported.
    """
    if not (text.isascii() and text.isdigit()):
        raise ValueError("invalid digit found in %r" % (text,))
    value = int(text)
    if value >= 2 ** bits:
        raise ValueError("number too large to fit in %d bits" % (bits,))
    return value



def address(family, text):
    try:
        socket.inet_pton(family, text)
    except OSError as e:
        raise ValueError(str(e))
    return text



def encodeName(name):
    return name.encode('ascii')



def setupBindings():
    bindings = {
        'WORD': WORD,
        'WHITESPACE': WHITESPACE,
        'COMMENT': COMMENT,
        'NEWLINE': NEWLINE,
        'AF_INET': socket.AF_INET,
        'AF_INET6': socket.AF_INET6,
        'Row': Row,
        'domainName': domainName,
        'unsigned': unsigned,
        'address': address,
        'encodeName': encodeName,
    }
    for recordType in RECORD_TYPES:
        bindings[recordType] = getattr(dns, 'Record_' + recordType)
    return bindings



class ZoneGrammar(makeGrammar(grammarSource, setupBindings(),
                              name='ZoneGrammar', extends=TokenGrammar,
                              unwrap=True)):
    """
    The zone line grammar applied to one L{TokenSequence}.

    @ivar recordTypes: The type keywords accepted, a subset of
        L{RECORD_TYPES}.
    @ivar classes: Mapping of class keywords to L{twisted.names.dns} class
        constants.
    """
    contexts = {
        'domain': "Domain name",
        'integer': "number",
        'duration': "Duration",
        'ttlSpace': "TTL",
        'classSpace': "Class",
        'ipv4': "IPv4 address",
        'ipv6': "IPv6 address",
        'rdata': "Resource Data",
    }

    def __init__(self, tokens, recordTypes=RECORD_TYPES, classes=CLASSES):
        TokenGrammar.__init__(self, tokens)
        self.recordTypes = recordTypes
        self.classes = classes


    def classChoice(self):
        return ' | '.join(self.classes)



def _grammarError(tokens, trace, errorClass=None):
    if errorClass is None:
        end = tokens.offset + len(tokens)
        if max(entry.position for entry in trace) >= end:
            errorClass = IncompleteInputError
        else:
            errorClass = GrammarError
    return errorClass(tokens, trace, diagnostics.formatTrace(tokens, trace))



def parseRow(tokens, recordTypes=RECORD_TYPES, classes=CLASSES):
    """
    Parse a whole line of tokens into a L{Row}.

    The shapes of the C{shape} rule are tried in order.  When all of them
    fail, the failure that reached the furthest token is reported.

    @param tokens: The L{TokenSequence} of one line.

    @raise IncompleteInputError: if the line ended while more was expected.
    @raise ResidualInputError: if a row matched but tokens are left over.
    @raise GrammarError: if no shape matched.
    @rtype: L{Row}
    """
    try:
        rest, row = ZoneGrammar(tokens, recordTypes, classes).parse('row')
    except Mismatch as e:
        raise _grammarError(tokens, e.trace)
    if rest:
        raise _grammarError(
            tokens, [diagnostics.expected(rest, 'end of line')],
            ResidualInputError)
    return row
