"""
Test cases for dnc.errors module.
"""

from twisted.trial import unittest

from dnc import errors


class DNErrorTests(unittest.TestCase):
    """Human readable representation of DN errors"""

    def test_with_value(self):
        exception = errors.MalformedOrder("O=RB,CN=A,OU=X")
        self.assertEqual(
            str(exception),
            "malformedOrder: DN does not begin or end with its primary "
            "attribute 'O=RB,CN=A,OU=X'",
        )

    def test_without_value(self):
        self.assertEqual(
            str(errors.MissingInput()),
            "missingInput: dn_string parameter is required",
        )

    def test_hierarchy(self):
        for cls in (
            errors.MissingInput,
            errors.DelimiterUnidentifiable,
            errors.MalformedOrder,
            errors.MalformedRdn,
            errors.UnknownAttribute,
            errors.DNStringUnparsable,
        ):
            self.assertTrue(issubclass(cls, errors.DNError))
            self.assertIsNotNone(cls.name)
