"""
Parse distinguished names written in assorted formats and render them in
one canonical form.

Input may be slash delimited (``/C=US/O=RB/CN=Jane Doe``, as emitted by
OpenSSL and CAS), comma delimited with the common name first or last, in
any case. The canonical form puts the common name first, joins RDNs with
``,`` and orders attributes by a configurable emission order.
"""

import enum
import re

from zope.interface import implementer

from dnc import interfaces
from dnc.attributes import (
    COMPOUND_SEPARATOR,
    DEFAULT_ATTRIBUTE_NAMES,
    DEFAULT_ORDER,
    AttributeStore,
    AttributeTypeAndValue,
    as_sequence,
    normalizeName,
    serialize,
    silentLog,
)
from dnc.errors import (
    DelimiterUnidentifiable,
    DNError,
    DNStringUnparsable,
    MalformedOrder,
    MalformedRdn,
    MissingInput,
)

PRIMARY_ATTRIBUTE = "CN"

# The non-word character in front of the last "key=" that is itself
# preceded by another "=". Underscore counts although \w matches it.
_delimiterPattern = re.compile(r"\A.*=.*([^\w\s+()]|_)\s?\w+=.*\Z")


def to_unicode(value):
    """
    Decodes value from utf-8 if it is a byte string, as DNs taken from
    request headers may be.
    """
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


class Transformation(enum.Enum):
    """Case policy applied to the whole input before parsing."""

    UPCASE = "upcase"
    DOWNCASE = "downcase"
    IDENTITY = "identity"

    @classmethod
    def lookup(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            raise ValueError("Unknown transformation: %r" % (value,))

    def apply(self, s):
        if self is Transformation.UPCASE:
            return s.upper()
        if self is Transformation.DOWNCASE:
            return s.lower()
        return s


def identify_delimiter(dn_string, log=silentLog):
    """
    Guess the character separating the RDNs of dn_string.

    Needs at least two RDNs to work with; a DN made of one RDN, or whose
    values contain something that looks like ``;key=``, will be guessed
    wrong or not at all.
    """
    match = _delimiterPattern.match(dn_string)
    if match is None:
        raise DelimiterUnidentifiable(dn_string)
    delimiter = match.group(1)
    log.debug(
        "Identified delimiter {delimiter!r} in {dn_string!r}",
        delimiter=delimiter,
        dn_string=dn_string,
    )
    return delimiter


def split_rdns(dn_string, delimiter):
    """
    Split dn_string on delimiter, dropping empty parts and the blanks
    that follow a delimiter.
    """
    return [rdn.lstrip(" ") for rdn in dn_string.split(delimiter) if rdn.strip()]


def begins_with_primary(rdn):
    return rdn.upper().startswith(PRIMARY_ATTRIBUTE + "=")


def fix_rdn_order(rdns, dn_string, log=silentLog):
    """
    Put the primary attribute first.

    LDAP style DNs often end with the common name. Those are reversed,
    once; if the common name is neither first nor last the DN is refused.
    """
    rdns = list(rdns)
    if rdns and begins_with_primary(rdns[0]):
        return rdns
    rdns.reverse()
    if rdns and begins_with_primary(rdns[0]):
        log.debug("Reversed RDN order of {dn_string!r}", dn_string=dn_string)
        return rdns
    raise MalformedOrder(dn_string)


def parse_rdn(rdn):
    """
    Split an RDN into its AttributeTypeAndValue members.

    A simple RDN has one member; ``CN=x+EMAIL=y`` is a compound RDN with
    two. Values may contain ``=``, only the first one separates.
    """
    r = []
    for member in rdn.split(COMPOUND_SEPARATOR):
        if "=" not in member:
            raise MalformedRdn(rdn)
        attributeType, value = member.split("=", 1)
        r.append(AttributeTypeAndValue(attributeType.strip(), value))
    return r


@implementer(interfaces.IDistinguishedName)
class DistinguishedName:
    """Distinguished name parsed into per-attribute values."""

    def __init__(
        self,
        dn_string=None,
        delimiter=None,
        transformation=Transformation.UPCASE,
        emission_order=DEFAULT_ORDER,
        attribute_names=DEFAULT_ATTRIBUTE_NAMES,
        retain_unknown=False,
        log=None,
    ):
        if dn_string is None:
            raise MissingInput()
        if log is None:
            log = silentLog

        self._original_input = to_unicode(dn_string)
        self._transformation = Transformation.lookup(transformation)
        self._normalized_input = self._transformation.apply(self._original_input)
        self._emission_order = tuple(normalizeName(n) for n in emission_order)

        if delimiter is None:
            delimiter = identify_delimiter(self._normalized_input, log)
        else:
            delimiter = to_unicode(delimiter)
            if len(delimiter) != 1:
                raise ValueError("Delimiter must be one character: %r" % (delimiter,))
            if not self._normalized_input:
                raise MissingInput()
        self._delimiter = delimiter

        self._rdns = tuple(
            fix_rdn_order(self.split_by_delimiter(), self._original_input, log)
        )

        store = AttributeStore(attribute_names, retain_unknown, log)
        for rdn in self._rdns:
            members = parse_rdn(rdn)
            if len(members) > 1:
                name = store.addCompound(members)
            else:
                name = store.add(members[0].attributeType, members[0].value)
            log.debug(
                "Assigned RDN {rdn!r} to {name}: {value!r}",
                rdn=rdn,
                name=name,
                value=store.get(name),
            )
        self._attributes = store.freeze()

    @property
    def original_input(self):
        return self._original_input

    @property
    def normalized_input(self):
        return self._normalized_input

    @property
    def delimiter(self):
        return self._delimiter

    @property
    def transformation(self):
        return self._transformation

    @property
    def emission_order(self):
        return self._emission_order

    @property
    def attributes(self):
        return self._attributes

    @property
    def rdns(self):
        return self._rdns

    def split_by_delimiter(self):
        return split_rdns(self._normalized_input, self._delimiter)

    def to_canonical_string(self):
        return serialize(self._attributes, self._emission_order)

    def values(self, name):
        return as_sequence(self._attributes.get(normalizeName(name)))

    def get(self, name, default=None):
        return self._attributes.get(normalizeName(name), default)

    def keys(self):
        return self._attributes.keys()

    def __getitem__(self, name):
        return self._attributes[normalizeName(name)]

    def __contains__(self, name):
        return normalizeName(name) in self._attributes

    def __str__(self):
        return self.to_canonical_string()

    def __repr__(self):
        return (
            self.__class__.__name__
            + "("
            + repr(self.to_canonical_string())
            + ")"
        )

    def __hash__(self):
        return hash(self.to_canonical_string())

    def __eq__(self, other):
        if isinstance(other, str):
            return self.to_canonical_string() == other
        if not isinstance(other, DistinguishedName):
            return NotImplemented
        return self.to_canonical_string() == other.to_canonical_string()

    def __ne__(self, other):
        r = self.__eq__(other)
        if r is NotImplemented:
            return r
        return not r


DN = DistinguishedName


def parse(dn_string, config=None, log=None, **options):
    """
    Parse dn_string into a DistinguishedName.

    Options given as keywords override those of config, a
    dnc.config.DNConfig.
    """
    if config is not None:
        kw = config.asOptions()
        kw.update(options)
        options = kw
    return DistinguishedName(dn_string, log=log, **options)


def to_dn(dn_string, **kw):
    """Parse dn_string, or return None if it is not a DN."""
    try:
        return parse(dn_string, **kw)
    except DNError:
        return None


def to_dn_strict(dn_string, **kw):
    """Like to_dn, but raise DNStringUnparsable instead of returning None."""
    try:
        return parse(dn_string, **kw)
    except DNError as e:
        raise DNStringUnparsable(dn_string) from e
