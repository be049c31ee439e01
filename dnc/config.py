import configparser
import os.path

from dnc.attributes import DEFAULT_ATTRIBUTE_NAMES, DEFAULT_ORDER, normalizeName
from dnc.distinguishedname import Transformation


class InvalidConfigError(Exception):
    """Configuration value could not be understood"""

    def __init__(self, option, value):
        Exception.__init__(self)
        self.option = option
        self.value = value

    def __str__(self):
        return "%s: %s=%r" % (self.__doc__, self.option, self.value)


def _names(value):
    return tuple(normalizeName(x) for x in value.split(",") if x.strip())


class DNConfig:
    """
    Parsing options shared by many DNs.

    Instances are never modified in place; use copy() to derive a
    configuration with some options changed.
    """

    def __init__(
        self,
        delimiter=None,
        transformation=Transformation.UPCASE,
        emission_order=DEFAULT_ORDER,
        attribute_names=DEFAULT_ATTRIBUTE_NAMES,
        retain_unknown=False,
    ):
        self.delimiter = delimiter
        self.transformation = Transformation.lookup(transformation)
        self.emission_order = tuple(normalizeName(n) for n in emission_order)
        self.attribute_names = tuple(normalizeName(n) for n in attribute_names)
        self.retain_unknown = bool(retain_unknown)

    def asOptions(self):
        return {
            "delimiter": self.delimiter,
            "transformation": self.transformation,
            "emission_order": self.emission_order,
            "attribute_names": self.attribute_names,
            "retain_unknown": self.retain_unknown,
        }

    def copy(self, **kw):
        options = self.asOptions()
        options.update(kw)
        return self.__class__(**options)

    def __eq__(self, other):
        if not isinstance(other, DNConfig):
            return NotImplemented
        return self.asOptions() == other.asOptions()

    def __ne__(self, other):
        return not (self == other)

    def __repr__(self):
        return "%s(%s)" % (
            self.__class__.__name__,
            ", ".join("%s=%r" % item for item in sorted(self.asOptions().items())),
        )

    @classmethod
    def fromConfigParser(cls, cfg, section="dn"):
        kw = {}
        if not cfg.has_section(section):
            return cls()

        if cfg.has_option(section, "delimiter"):
            delimiter = cfg.get(section, "delimiter")
            if len(delimiter) > 1:
                raise InvalidConfigError("delimiter", delimiter)
            kw["delimiter"] = delimiter or None

        if cfg.has_option(section, "transformation"):
            value = cfg.get(section, "transformation")
            try:
                kw["transformation"] = Transformation.lookup(value)
            except ValueError:
                raise InvalidConfigError("transformation", value)

        if cfg.has_option(section, "order"):
            kw["emission_order"] = _names(cfg.get(section, "order"))

        if cfg.has_option(section, "attributes"):
            kw["attribute_names"] = _names(cfg.get(section, "attributes"))

        if cfg.has_option(section, "unknown-attributes"):
            policy = cfg.get(section, "unknown-attributes").strip().lower()
            if policy not in ("reject", "retain"):
                raise InvalidConfigError("unknown-attributes", policy)
            kw["retain_unknown"] = policy == "retain"

        return cls(**kw)


CONFIG_FILES = [
    "/etc/dnc/global.cfg",
    os.path.expanduser("~/.dnc/global.cfg"),
]


def loadConfig(configFiles=None):
    """
    Load configuration files and return a new DNConfig.

    Later files override earlier ones. Missing files are skipped.
    """
    x = configparser.ConfigParser(interpolation=None)
    if configFiles is None:
        configFiles = CONFIG_FILES
    x.read(configFiles)
    return DNConfig.fromConfigParser(x)
