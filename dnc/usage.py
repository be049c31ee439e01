"""
Command line options available to dnc tools.
"""
from twisted.python import usage, reflect
from twisted.python.usage import UsageError

from dnc import config
from dnc.distinguishedname import Transformation

__all__ = [
    "Options",
    "Options_config",
    "Options_delimiter",
    "Options_order",
    "Options_transformation",
    "Options_unknown",
    "UsageError",
]


class Options(usage.Options):
    optParameters = ()

    def postOptions(self):
        postOpt = {}
        reflect.addMethodNamesToDict(self.__class__, postOpt, "postOptions_")
        for name in sorted(postOpt.keys()):
            method = getattr(self, "postOptions_" + name)
            method()


class Options_config:
    """
    Mixin providing --config; values read from the file are the defaults
    for the other options.
    """

    optParameters = (
        ("config", None, None, "read defaults from this configuration file"),
    )

    def postOptions_config(self):
        files = None
        if self.opts["config"] is not None:
            files = [self.opts["config"]]
        try:
            self.opts["dnconfig"] = config.loadConfig(configFiles=files)
        except config.InvalidConfigError as e:
            raise usage.UsageError(str(e))

    def getDNConfig(self):
        """Configuration file values overridden by command line options."""
        overrides = {}
        if self.opts.get("delimiter") is not None:
            overrides["delimiter"] = self.opts["delimiter"]
        if self.opts.get("transformation") is not None:
            overrides["transformation"] = self.opts["transformation"]
        if self.opts.get("order") is not None:
            overrides["emission_order"] = self.opts["order"]
        if self.opts.get("retain-unknown"):
            overrides["retain_unknown"] = True
        return self.opts["dnconfig"].copy(**overrides)


class Options_delimiter:
    optParameters = (
        ("delimiter", "d", None, "RDN delimiter, guessed when not given"),
    )

    def postOptions_delimiter(self):
        val = self.opts["delimiter"]
        if val is not None and len(val) != 1:
            raise usage.UsageError("delimiter must be a single character")


class Options_transformation:
    optParameters = (
        ("transformation", "t", None,
         "case transformation (one of upcase, downcase, identity)"),
    )

    def postOptions_transformation(self):
        val = self.opts["transformation"]
        if val is None:
            return
        try:
            self.opts["transformation"] = Transformation.lookup(val)
        except ValueError:
            raise usage.UsageError("bad transformation: %s" % (val,))


class Options_order:
    optParameters = (
        ("order", "o", None,
         "comma separated attribute emission order, e.g. cn,ou,o,dc,c"),
    )

    def postOptions_order(self):
        val = self.opts["order"]
        if val is None:
            return
        order = tuple(x.strip().upper() for x in val.split(",") if x.strip())
        if not order:
            raise usage.UsageError("order must name at least one attribute")
        self.opts["order"] = order


class Options_unknown:
    optFlags = (
        ("retain-unknown", None, "keep unrecognized attribute types"),
    )
