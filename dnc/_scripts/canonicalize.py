import sys

from twisted.logger import Logger, textFileLogObserver

from dnc import usage
from dnc.distinguishedname import parse
from dnc.errors import DNError


def canonicalize(lines, cfg, log, out, err):
    """
    Write the canonical form of each DN in lines to out.

    Returns the exit status: 1 if any line could not be parsed.
    """
    exitStatus = 0
    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            dn = parse(line, config=cfg, log=log)
        except DNError as e:
            err.write("fail: %s\n" % (e,))
            exitStatus = 1
        else:
            out.write(dn.to_canonical_string() + "\n")
    return exitStatus


class MyOptions(
    usage.Options,
    usage.Options_config,
    usage.Options_delimiter,
    usage.Options_transformation,
    usage.Options_order,
    usage.Options_unknown,
):
    """Print distinguished names in canonical form"""

    optFlags = (("verbose", "v", "log parsing steps to stderr"),)

    def parseArgs(self, *dns):
        self.opts["dns"] = dns


def console_script(argv=None, stdin=None, stdout=None, stderr=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        opts = MyOptions()
        opts.parseOptions(argv)
    except usage.UsageError as ue:
        stderr.write("{}: {}\n".format(sys.argv[0], ue))
        return 1

    log = None
    if opts["verbose"]:
        log = Logger(namespace="dnc", observer=textFileLogObserver(stderr))

    lines = opts["dns"] or stdin
    return canonicalize(lines, opts.getDNConfig(), log, stdout, stderr)


if __name__ == "__main__":
    sys.exit(console_script())
