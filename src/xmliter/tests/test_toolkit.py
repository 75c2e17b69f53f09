# -*- coding: utf-8 -*-

"""
Tests for the toolkit entry point: parsing, streaming, queries and output
"""

import doctest
import os
import unittest
from importlib import metadata
from io import BytesIO

from lxml import etree

import xmliter
from xmliter import toolkit
from xmliter.config import ToolkitConfig
from xmliter.errors import (
    QueryCompileError, QueryEvaluationFailed, ToolkitConfigurationError)
from xmliter.namespaces import NamespaceMapping
from xmliter.nodetypes import children, elements
from xmliter.query import Query
from xmliter.sequences import NodeSequence
from xmliter.toolkit import Toolkit

from .common_imports import (
    HelperTestCase, fileInTestDir, read_file, tmpfile, SAMPLE_NS, EXTRA_NS)


class ToolkitTestCase(HelperTestCase):

    def setUp(self):
        self.toolkit = Toolkit()

    def test_engines_created_eagerly(self):
        self.assertTrue(isinstance(self.toolkit.parser, etree.XMLParser))
        self.assertEqual(2, self.toolkit.serializer.indent_width)

    def test_parse_file(self):
        tree = self.toolkit.parse(fileInTestDir('sample.xml'))
        self.assertEqual('{%s}root' % SAMPLE_NS, tree.getroot().tag)

    def test_parse_file_object(self):
        with open(fileInTestDir('sample.xml'), 'rb') as f:
            tree = self.toolkit.parse(f)
        self.assertTrue(tree.getroot() is not None)

    def test_parse_string(self):
        tree = self.toolkit.parse_string('<a><b/></a>')
        self.assertEqual('a', tree.getroot().tag)
        tree = self.toolkit.parse_string(
            b'<?xml version="1.0" encoding="UTF-8"?><a/>')
        self.assertEqual('a', tree.getroot().tag)

    def test_parse_string_unicode(self):
        tree = self.toolkit.parse_string('<a>\xe9€</a>')
        self.assertEqual('\xe9€', tree.getroot().text)

    def test_parse_string_declared_encoding(self):
        latin1 = '<?xml version="1.0" encoding="ISO-8859-1"?><a>\xe9</a>'
        tree = self.toolkit.parse_string(latin1.encode('iso-8859-1'))
        self.assertEqual('\xe9', tree.getroot().text)
        self.assertEqual('ISO-8859-1', tree.docinfo.encoding)
        self.assertRaises(ValueError, self.toolkit.parse_string, latin1)

    def test_parse_string_keeps_top_level_nodes(self):
        tree = self.toolkit.parse_string('<!-- c --><a/><?pi x?>')
        self.assertEqual(
            [etree.Comment, 'a', etree.ProcessingInstruction],
            [node.tag for node in children(tree)])

    def test_malformed_input_propagates(self):
        self.assertRaises(etree.XMLSyntaxError,
                          self.toolkit.parse_string, '<a><b></a>')

    def test_missing_file_propagates(self):
        self.assertRaises(IOError, self.toolkit.parse,
                          fileInTestDir('does-not-exist.xml'))

    def test_xinclude(self):
        tree = self.toolkit.parse(fileInTestDir('including.xml'))
        chapters = [e.tag for e in elements(children(tree.getroot()))]
        self.assertEqual(['chapter'], chapters)

    def test_xinclude_disabled(self):
        tree = Toolkit(xinclude=False).parse(fileInTestDir('including.xml'))
        tags = [e.tag for e in elements(children(tree.getroot()))]
        self.assertEqual(['{http://www.w3.org/2001/XInclude}include'], tags)

    def test_remove_blank_text(self):
        source = '<a>\n  <b/>\n</a>'
        tree = Toolkit(remove_blank_text=True).parse_string(source)
        self.assertEqual(b'<a><b/></a>', etree.tostring(tree))

    def test_iterparse(self):
        with open(fileInTestDir('sample.xml'), 'rb') as f:
            events = [(event, elem.tag) for event, elem
                      in self.toolkit.iterparse(f, events=('start', 'end'))]
        self.assertEqual(('start', '{%s}root' % SAMPLE_NS), events[0])
        self.assertEqual(('end', '{%s}root' % SAMPLE_NS), events[-1])
        self.assertEqual(len([e for e in events if e[0] == 'start']),
                         len([e for e in events if e[0] == 'end']))

    def test_iterparse_tag(self):
        tag = '{%s}para' % SAMPLE_NS
        texts = [elem.text for _, elem in self.toolkit.iterparse(
            fileInTestDir('sample.xml'), tag=tag)]
        self.assertEqual(['First', 'Second'], texts)

    def test_traversal(self):
        sample = self.toolkit.parse(fileInTestDir('sample.xml'))
        self.assertFalse(elements(children(sample)).is_empty())
        self.assertFalse(children(sample.getroot()).is_empty())

    def test_xpath(self):
        sample = self.toolkit.parse(fileInTestDir('sample.xml'))
        ns = NamespaceMapping({'sample': SAMPLE_NS})
        self.assertTrue(
            self.toolkit.xpath('//root').nodes(sample).is_empty())
        self.assertFalse(
            self.toolkit.xpath('//sample:root', ns).nodes(sample).is_empty())

    def test_nodes(self):
        sample = self.toolkit.parse(fileInTestDir('sample.xml'))
        result = self.toolkit.nodes(
            self.toolkit.xpath('//x:note', {'x': EXTRA_NS}), sample)
        self.assertTrue(isinstance(result, NodeSequence))
        self.assertEqual(['Aside'], [e.text for e in result])
        self.assertEqual(0, len(self.toolkit.nodes('//note', sample)))

    def test_smart_strings_option(self):
        root = etree.XML('<a>t</a>')
        plain = Toolkit(smart_strings=False).xpath('//text()').evaluate(root)
        self.assertFalse(hasattr(plain[0], 'getparent'))
        smart = self.toolkit.xpath('//text()').evaluate(root)
        self.assertTrue(hasattr(smart[0], 'getparent'))

    def test_xpath_errors(self):
        self.assertRaises(QueryCompileError, self.toolkit.xpath, '//[')
        q = self.toolkit.xpath('//undeclared:a')
        self.assertRaises(QueryEvaluationFailed, q.nodes, etree.XML('<a/>'))

    def test_css(self):
        root = etree.XML('<a><b class="x">1</b><b>2</b><c class="x"/></a>')
        q = self.toolkit.css('b.x')
        self.assertTrue(isinstance(q, Query))
        self.assertEqual('b.x', q.source)
        self.assertEqual(['1'], [e.text for e in q.nodes(root)])

    def test_css_namespaces(self):
        sample = self.toolkit.parse(fileInTestDir('sample.xml'))
        q = self.toolkit.css('s|section > s|para', {'s': SAMPLE_NS})
        self.assertEqual(['First', 'Second'], [e.text for e in q(sample)])

    def test_css_syntax_error(self):
        self.assertRaises(QueryCompileError, self.toolkit.css, 'b[')

    def test_to_string(self):
        tree = self.toolkit.parse_string('<root/>')
        result = self.toolkit.to_string(tree)
        self.assertTrue(result.startswith('<root'))
        self.assertFalse('<?xml' in result)

    def test_transform(self):
        out = BytesIO()
        with open(fileInTestDir('sample.xml'), 'rb') as f:
            tree = self.toolkit.transform(f, out)
        data = out.getvalue()
        self.assertTrue(data.startswith(b'<?xml'))
        self.assertEqual(
            etree.tostring(tree.getroot()), etree.tostring(
                etree.fromstring(data)))

    def test_transform_to_file(self):
        with tmpfile(suffix='.xml') as filename:
            self.toolkit.transform(BytesIO(b'<a><b/></a>'), filename)
            self.assertTrue(read_file(filename).endswith('<a><b/></a>'))

    def test_logging(self):
        with self.assertLogs('xmliter.toolkit', 'DEBUG') as captured:
            Toolkit()
        self.assertEqual(1, len(captured.records))

    def test_repr(self):
        self.assertTrue('ToolkitConfig(' in repr(self.toolkit))


class ToolkitConfigurationTestCase(HelperTestCase):

    def test_keyword_options(self):
        tk = Toolkit(indent_width=4, omit_declaration=False)
        self.assertEqual(4, tk.config.indent_width)
        self.assertEqual(4, tk.serializer.indent_width)
        self.assertFalse(tk.serializer.omit_declaration)

    def test_config_object(self):
        config = ToolkitConfig(indent=False)
        tk = Toolkit(config)
        self.assertTrue(tk.config is config)
        self.assertFalse(tk.serializer.indent)

    def test_config_with_overrides(self):
        config = ToolkitConfig(indent=False)
        tk = Toolkit(config, encoding='ASCII')
        self.assertFalse(tk.config.indent)
        self.assertEqual('ASCII', tk.config.encoding)
        self.assertEqual('UTF-8', config.encoding)

    def test_unknown_option(self):
        self.assertRaises(ToolkitConfigurationError, Toolkit, colour='red')

    def test_unknown_encoding_fails_on_creation(self):
        self.assertRaises(ToolkitConfigurationError, Toolkit,
                          encoding='no-such-codec', omit_declaration=False)
        self.assertRaises(ToolkitConfigurationError, Toolkit,
                          ToolkitConfig(), encoding='no-such-codec')


class PackageVersionTestCase(HelperTestCase):

    version_file = os.path.join(
        os.path.dirname(__file__), '..', '..', '..', 'version.txt')

    def test_version_from_distribution(self):
        self.assertEqual(metadata.version('xmliter'), xmliter.__version__)

    @unittest.skipUnless(os.path.exists(version_file), "not a source checkout")
    def test_version_matches_version_file(self):
        self.assertEqual(read_file(self.version_file).strip(),
                         xmliter.__version__)


class ModuleDoctestTestCase(unittest.TestCase):

    def test_doctests(self):
        result = doctest.testmod(toolkit)
        self.assertEqual(0, result.failed)


if __name__ == '__main__':
    unittest.main()
