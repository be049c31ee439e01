from zope.interface import Attribute, Interface


class IDistinguishedName(Interface):
    """
    A parsed, normalized distinguished name.

    >>> from dnc.distinguishedname import DistinguishedName
    >>> dn = DistinguishedName('/C=US/O=RB/OU=DEV/CN=Jane Doe')
    >>> dn.to_canonical_string()
    'CN=JANE DOE,O=RB,OU=DEV,C=US'

    """

    original_input = Attribute("The string the DN was parsed from.")
    normalized_input = Attribute("original_input after case transformation.")
    delimiter = Attribute("The character separating RDNs in the input.")
    transformation = Attribute("The Transformation applied to the input.")
    emission_order = Attribute("Attribute names in canonical emission order.")
    attributes = Attribute("Read-only mapping of attribute name to value.")
    rdns = Attribute("The RDN strings, primary attribute first.")

    def to_canonical_string():
        """
        Render the DN with ',' between RDNs and attributes in emission order.

        >>> from dnc.distinguishedname import DistinguishedName
        >>> DistinguishedName('CN=a,OU=b,OU=c').to_canonical_string()
        'CN=A,OU=B,OU=C'

        """

    def values(name):
        """
        Get the values of one attribute as a list of strings.

        >>> from dnc.distinguishedname import DistinguishedName
        >>> DistinguishedName('CN=a,OU=b,OU=c').values('ou')
        ['B', 'C']
        >>> DistinguishedName('CN=a,OU=b,OU=c').values('dc')
        []

        """

    def split_by_delimiter():
        """The normalized input split on the delimiter, empty parts dropped."""
