"""Parse and canonicalize X.509 / LDAP distinguished names"""
__version__ = "0.3.0"

__title__ = "dnc"
__description__ = "Parse and canonicalize X.509 / LDAP distinguished names"

__license__ = "MIT"
__author__ = "The dnc developers"
__copyright__ = "Copyright (c) 2016-2026 {}".format(__author__)
