"""Toolkit options.

Options are passed as keyword arguments, like the options of lxml's parser
classes.  `ToolkitConfig.from_environ` additionally picks them up from
environment variables named after the option, e.g. ``XMLITER_HUGE_TREE=1``.
"""

import codecs
import os

from xmliter.errors import ToolkitConfigurationError

__all__ = ['ToolkitConfig']

_DEFAULTS = {
    # parser
    'xinclude': True,
    'remove_blank_text': False,
    'resolve_entities': False,
    'no_network': True,
    'huge_tree': False,
    # queries
    'smart_strings': True,
    'regexp': True,
    # serializer
    'indent': True,
    'indent_width': 2,
    'omit_declaration': True,
    'encoding': 'UTF-8',
}

_PARSER_OPTIONS = (
    'remove_blank_text', 'resolve_entities', 'no_network', 'huge_tree')

_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off', '')


def _to_bool(name, value):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise ToolkitConfigurationError(
        "option '%s' requires a boolean value, got %r" % (name, value))


def _to_int(name, value):
    try:
        result = int(value)
    except (TypeError, ValueError):
        raise ToolkitConfigurationError(
            "option '%s' requires an integer value, got %r" % (name, value)
        ) from None
    if result < 0:
        raise ToolkitConfigurationError(
            "option '%s' must not be negative, got %r" % (name, value))
    return result


def _to_str(name, value):
    if not isinstance(value, str) or not value:
        raise ToolkitConfigurationError(
            "option '%s' requires a non-empty string, got %r" % (name, value))
    return value


def _to_encoding(name, value):
    value = _to_str(name, value)
    try:
        codecs.lookup(value)
    except LookupError:
        raise ToolkitConfigurationError(
            "option '%s' names an unknown encoding: %r" % (name, value)
        ) from None
    return value


_CONVERTERS = {
    'encoding': _to_encoding,
}


def _converter(name, default):
    if name in _CONVERTERS:
        return _CONVERTERS[name]
    if isinstance(default, bool):
        return _to_bool
    if isinstance(default, int):
        return _to_int
    return _to_str


class ToolkitConfig(object):
    """Validated set of toolkit options.

    Unknown option names and values of the wrong type raise
    `ToolkitConfigurationError`.
    """
    def __init__(self, **options):
        unknown = sorted(set(options) - set(_DEFAULTS))
        if unknown:
            raise ToolkitConfigurationError(
                "unknown option(s): %s" % ', '.join(unknown))
        for name, default in _DEFAULTS.items():
            value = options.get(name, default)
            setattr(self, name, _converter(name, default)(name, value))

    @classmethod
    def from_environ(cls, environ=None, prefix='XMLITER_', **overrides):
        if environ is None:
            environ = os.environ
        options = {}
        for name in _DEFAULTS:
            env_name = prefix + name.upper()
            if env_name in environ:
                options[name] = environ[env_name]
        options.update(overrides)
        return cls(**options)

    def as_dict(self):
        return dict((name, getattr(self, name)) for name in _DEFAULTS)

    def parser_options(self):
        """Keyword arguments for ``lxml.etree.XMLParser``."""
        return dict((name, getattr(self, name)) for name in _PARSER_OPTIONS)

    def serializer_options(self):
        return dict(
            indent=self.indent, indent_width=self.indent_width,
            omit_declaration=self.omit_declaration, encoding=self.encoding)

    def __eq__(self, other):
        if not isinstance(other, ToolkitConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, ', '.join(
            '%s=%r' % item for item in self.as_dict().items()))
