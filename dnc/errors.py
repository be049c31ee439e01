"""
Exceptions raised while parsing distinguished names.

Every failure has its own class so that callers can tell a string that is
not a DN at all (DelimiterUnidentifiable) from one that is a DN in an
order this library refuses to guess (MalformedOrder).
"""


class DNError(Exception):
    """Base class for all DN parsing errors."""

    name = None

    def __init__(self, value=None):
        Exception.__init__(self)
        self.value = value

    def describe(self):
        return self.__doc__.strip()

    def __str__(self):
        if self.value is not None:
            return "%s: %s %r" % (self.name, self.describe(), self.value)
        return "%s: %s" % (self.name, self.describe())


class MissingInput(DNError):
    """dn_string parameter is required"""

    name = "missingInput"


class DelimiterUnidentifiable(DNError):
    """DN delimiter could not be identified in"""

    name = "delimiterUnidentifiable"


class MalformedOrder(DNError):
    """DN does not begin or end with its primary attribute"""

    name = "malformedOrder"


class MalformedRdn(DNError):
    """Invalid relative distinguished name"""

    name = "malformedRdn"


class UnknownAttribute(DNError):
    """Unrecognized attribute type"""

    name = "unknownAttribute"


class DNStringUnparsable(DNError):
    """Could not force conversion to DN"""

    name = "dnStringUnparsable"
