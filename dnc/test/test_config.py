"""
Test cases for the dnc.config module.
"""

import os

from twisted.trial import unittest

from dnc import config
from dnc.attributes import DEFAULT_ATTRIBUTE_NAMES, DEFAULT_ORDER
from dnc.distinguishedname import Transformation, parse


def writeFile(path, content):
    with open(path, "wb") as f:
        f.write(content)


def loadFromContent(testCase, content):
    """
    Load a configuration made of raw `content`.
    """
    base_path = testCase.mktemp()
    os.mkdir(base_path)
    config_path = os.path.join(base_path, "test.cfg")
    writeFile(config_path, content)
    return config.loadConfig(configFiles=[config_path])


class TestLoadConfig(unittest.TestCase):
    def testNoFiles(self):
        """
        Without configuration files the defaults are used.
        """
        self.assertEqual(config.loadConfig(configFiles=[]), config.DNConfig())

    def testMissingFile(self):
        cfg = config.loadConfig(configFiles=[os.path.join(self.mktemp(), "x.cfg")])
        self.assertEqual(cfg, config.DNConfig())

    def testNoSection(self):
        cfg = loadFromContent(self, b"[other]\norder = cn, c\n")
        self.assertEqual(cfg, config.DNConfig())

    def testAllOptions(self):
        cfg = loadFromContent(
            self,
            b"""\
[dn]
delimiter = %
transformation = Downcase
order = cn, ou, o, dc, c
attributes = cn, ou, o, dc, c, email
Unknown-Attributes = retain
""",
        )
        self.assertEqual(cfg.delimiter, "%")
        self.assertIs(cfg.transformation, Transformation.DOWNCASE)
        self.assertEqual(cfg.emission_order, ("CN", "OU", "O", "DC", "C"))
        self.assertEqual(cfg.attribute_names, ("CN", "OU", "O", "DC", "C", "EMAIL"))
        self.assertTrue(cfg.retain_unknown)

    def testMultipleConfigurationFiles(self):
        """
        Later files override values of earlier ones.
        """
        self.dir = self.mktemp()
        os.mkdir(self.dir)
        f1 = os.path.join(self.dir, "one.cfg")
        writeFile(f1, b"[dn]\norder = cn, c\ntransformation = identity\n")
        f2 = os.path.join(self.dir, "two.cfg")
        writeFile(f2, b"[dn]\norder = cn, o\n")

        cfg = config.loadConfig(configFiles=[f1, f2])

        self.assertEqual(cfg.emission_order, ("CN", "O"))
        self.assertIs(cfg.transformation, Transformation.IDENTITY)

    def testBadTransformation(self):
        e = self.assertRaises(
            config.InvalidConfigError,
            loadFromContent,
            self,
            b"[dn]\ntransformation = titlecase\n",
        )
        self.assertEqual(e.option, "transformation")
        self.assertEqual(
            str(e),
            "Configuration value could not be understood: "
            "transformation='titlecase'",
        )

    def testBadPolicy(self):
        self.assertRaises(
            config.InvalidConfigError,
            loadFromContent,
            self,
            b"[dn]\nunknown-attributes = maybe\n",
        )

    def testBadDelimiter(self):
        self.assertRaises(
            config.InvalidConfigError,
            loadFromContent,
            self,
            b"[dn]\ndelimiter = //\n",
        )


class TestDNConfig(unittest.TestCase):
    def testDefaults(self):
        cfg = config.DNConfig()
        self.assertIsNone(cfg.delimiter)
        self.assertIs(cfg.transformation, Transformation.UPCASE)
        self.assertEqual(cfg.emission_order, DEFAULT_ORDER)
        self.assertEqual(cfg.attribute_names, DEFAULT_ATTRIBUTE_NAMES)
        self.assertFalse(cfg.retain_unknown)

    def testCopy(self):
        cfg = config.DNConfig(transformation="identity")
        copied = cfg.copy(emission_order=["cn", "c"])
        self.assertEqual(copied.emission_order, ("CN", "C"))
        self.assertIs(copied.transformation, Transformation.IDENTITY)
        self.assertEqual(cfg.emission_order, DEFAULT_ORDER)

    def testParseWithConfig(self):
        cfg = config.DNConfig(emission_order=("cn", "ou", "o", "dc", "c"))
        s = "CN=Last First M (initial),O=rb,OU=people,C=us,DC=org,DC=example"
        self.assertEqual(
            parse(s, config=cfg).to_canonical_string(),
            "CN=LAST FIRST M (INITIAL),OU=PEOPLE,O=RB,DC=ORG,DC=EXAMPLE,C=US",
        )

    def testParseOptionsOverrideConfig(self):
        cfg = config.DNConfig(emission_order=("cn", "c"), delimiter="/")
        got = parse("/C=US/O=RB/CN=Jane", config=cfg, emission_order=DEFAULT_ORDER)
        self.assertEqual(got.delimiter, "/")
        self.assertEqual(got.to_canonical_string(), "CN=JANE,O=RB,C=US")
