import pytest

from tei_kit.parsers.models import ParsedDocument
from tei_kit.parsers.tei_parser import TeiParser
from tei_kit.trees import TreeConfig, create_tree_backend

SAMPLE_TEI = """<?xml version="1.0" encoding="UTF-8"?>
<TEI xmlns="http://www.tei-c.org/ns/1.0" xml:lang="en">
  <teiHeader>
    <fileDesc>
      <titleStmt>
        <title>Sample TEI Document</title>
        <author>Jane Doe</author>
        <editor>John Editor</editor>
      </titleStmt>
      <publicationStmt>
        <publisher>Digital Humanities Press</publisher>
        <date>2024</date>
      </publicationStmt>
      <sourceDesc>
        <p>A sample TEI document for testing the reader application.</p>
      </sourceDesc>
    </fileDesc>
    <profileDesc>
      <textClass>
        <keywords>
          <term>sample</term>
          <term>testing</term>
          <term>digital humanities</term>
        </keywords>
      </textClass>
    </profileDesc>
  </teiHeader>
  <text>
    <body>
      <div type="chapter" xml:id="ch1" n="1">
        <head>Chapter 1: Introduction</head>
        <p>This is the first chapter.<note place="foot">A footnote.</note></p>
        <p>TEI provides a framework for <hi rend="italic">digital text encoding</hi>.</p>
        <div type="section" xml:id="ch1.1">
          <head>Background</head>
          <p>Nested section prose.</p>
        </div>
        <div type="section">
          <p>Untitled section prose.</p>
        </div>
      </div>
      <div type="chapter" xml:id="ch2" n="2">
        <head>Chapter 2: Features</head>
        <lg type="poem">
          <l>Here is a sample poem line,</l><lb/>
          <l>To show how verse appears.</l>
        </lg>
        <pb n="2"/>
      </div>
      <div type="chapter" xml:id="ch3" n="3">
        <head>Chapter 3: Conclusion</head>
        <p>This sample document demonstrates TEI.</p>
      </div>
    </body>
  </text>
</TEI>"""

SPARSE_TEI = """<TEI>
  <text><body>
    <div><p>Only prose.</p></div>
  </body></text>
</TEI>"""


@pytest.fixture(scope="module", params=["lxml", "etree"])
def parser(request: pytest.FixtureRequest) -> TeiParser:
    return TeiParser(backend=create_tree_backend(TreeConfig(backend=request.param)))


@pytest.fixture(scope="module")
def parsed_sample(parser: TeiParser) -> ParsedDocument:
    """Parse the sample once per backend, reuse across tests."""
    return parser.parse(SAMPLE_TEI)


@pytest.fixture(scope="module")
def parsed_sparse(parser: TeiParser) -> ParsedDocument:
    return parser.parse(SPARSE_TEI)


@pytest.fixture(scope="module")
def sample_tei() -> str:
    return SAMPLE_TEI
