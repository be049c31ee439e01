"""
Attribute values of a parsed DN and their canonical rendering.

A DN maps each attribute name to exactly one value, which is one of:

- Scalar: the attribute appeared once, as a simple RDN.
- ValueList: the attribute appeared in several simple RDNs.
- Compound: a multi-valued RDN (``CN=x+EMAIL=y``), stored under the
  name of its first member.
"""

from types import MappingProxyType

from twisted.logger import Logger

from dnc.errors import UnknownAttribute

DEFAULT_ATTRIBUTE_NAMES = ("CN", "L", "ST", "O", "OU", "C", "STREET", "DC", "UID")
DEFAULT_ORDER = DEFAULT_ATTRIBUTE_NAMES

RDN_SEPARATOR = ","
COMPOUND_SEPARATOR = "+"


def _discard(event):
    pass


silentLog = Logger(namespace="dnc", observer=_discard)


def normalizeName(name):
    return name.strip().upper()


class AttributeTypeAndValue:
    """One ``type=value`` member of an RDN."""

    def __init__(self, attributeType, value):
        self.attributeType = attributeType
        self.value = value

    def getText(self):
        return "=".join((self.attributeType, self.value))

    def __repr__(self):
        return (
            self.__class__.__name__
            + "(attributeType="
            + repr(self.attributeType)
            + ", value="
            + repr(self.value)
            + ")"
        )

    def __hash__(self):
        return hash((self.attributeType.upper(), self.value))

    def __eq__(self, other):
        if not isinstance(other, AttributeTypeAndValue):
            return NotImplemented
        return (
            self.attributeType.upper() == other.attributeType.upper()
            and self.value == other.value
        )

    def __ne__(self, other):
        return not (self == other)


class AttributeValue:
    """Base class of the value variants."""

    def isEmpty(self):
        raise NotImplementedError("isEmpty method is not implemented")

    def strings(self):
        raise NotImplementedError("strings method is not implemented")

    def _key(self):
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, AttributeValue):
            return NotImplemented
        return self.__class__ is other.__class__ and self._key() == other._key()

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((self.__class__.__name__, self._key()))


class Scalar(AttributeValue):
    def __init__(self, value):
        self.value = value

    def isEmpty(self):
        return not self.value

    def strings(self):
        return [self.value]

    def append(self, value):
        return ValueList((self.value, value))

    def _key(self):
        return self.value

    def __repr__(self):
        return "Scalar(%r)" % (self.value,)


class ValueList(AttributeValue):
    def __init__(self, values):
        self.values = tuple(values)

    def isEmpty(self):
        return not any(self.values)

    def strings(self):
        return list(self.values)

    def append(self, value):
        return ValueList(self.values + (value,))

    def _key(self):
        return self.values

    def __repr__(self):
        return "ValueList(%r)" % (list(self.values),)


class Compound(AttributeValue):
    def __init__(self, attributeTypesAndValues):
        self.attributeTypesAndValues = tuple(attributeTypesAndValues)

    def isEmpty(self):
        return not self.attributeTypesAndValues

    def strings(self):
        return [x.value for x in self.attributeTypesAndValues]

    def split(self):
        return self.attributeTypesAndValues

    def _key(self):
        return self.attributeTypesAndValues

    def __repr__(self):
        return "Compound(%r)" % (list(self.attributeTypesAndValues),)


def as_sequence(value):
    """
    Treat an absent, scalar, list or compound value as a list of strings.
    """
    if value is None:
        return []
    return value.strings()


def render(name, value):
    """
    Render one attribute as a list of RDN strings.

    A ValueList yields one RDN per element; every other variant yields a
    single RDN. Empty values yield nothing.
    """
    if value is None:
        return []
    if not isinstance(value, AttributeValue):
        raise TypeError("Cannot render %r" % (value,))
    if value.isEmpty():
        return []
    if isinstance(value, Scalar):
        return ["%s=%s" % (name, value.value)]
    if isinstance(value, ValueList):
        return ["%s=%s" % (name, v) for v in value.values]
    if isinstance(value, Compound):
        return [COMPOUND_SEPARATOR.join(x.getText() for x in value.split())]
    raise TypeError("Cannot render %s" % (value.__class__.__name__,))


def serialize(attributes, order=DEFAULT_ORDER):
    rdns = []
    for name in order:
        rdns.extend(render(normalizeName(name), attributes.get(normalizeName(name))))
    return RDN_SEPARATOR.join(rdns)


class AttributeStore:
    """
    Collects the attribute values of one DN while it is being parsed.
    """

    def __init__(self, attributeNames=DEFAULT_ATTRIBUTE_NAMES,
                 retainUnknown=False, log=silentLog):
        self.attributeNames = frozenset(normalizeName(n) for n in attributeNames)
        self.retainUnknown = retainUnknown
        self.log = log
        self._values = {}

    def lookup(self, attributeType):
        """Return the canonical name for attributeType or fail."""
        name = normalizeName(attributeType)
        if name in self.attributeNames:
            return name
        if not self.retainUnknown:
            raise UnknownAttribute(attributeType)
        self.log.warn(
            "Retaining unrecognized attribute type {attributeType!r}",
            attributeType=attributeType,
        )
        return name

    def add(self, attributeType, value):
        """
        Record a simple RDN. Empty values are dropped, as the canonical
        form has no room for them.
        """
        name = self.lookup(attributeType)
        if not value:
            self.log.debug("Dropped empty value of {name}", name=name)
            return name
        current = self._values.get(name)
        if current is None or isinstance(current, Compound):
            self._values[name] = Scalar(value)
        else:
            self._values[name] = current.append(value)
        return name

    def addCompound(self, attributeTypesAndValues):
        attributeTypesAndValues = tuple(attributeTypesAndValues)
        name = self.lookup(attributeTypesAndValues[0].attributeType)
        self._values[name] = Compound(attributeTypesAndValues)
        return name

    def get(self, name, default=None):
        return self._values.get(normalizeName(name), default)

    def freeze(self):
        return MappingProxyType(dict(self._values))
