import pytest

from tei_kit.errors import MalformedDocument
from tei_kit.trees.base import Exclusion, TreeBackend

DOC = """<TEI xmlns="http://www.tei-c.org/ns/1.0" xml:lang="fr">
<text><body>
  <div xml:id="a" type="part">Alpha <hi>one</hi>
    <div id="b">Beta<note place="foot">Foot</note> tail-b</div>
    after-b <note place="margin">Margin</note>
    <div>Gamma</div>
  </div>
  <div>Delta<pb n="2"/>Epsilon</div>
</body></text>
</TEI>"""


class TestQueries:
    def test_find_returns_first_descendant(self, backend: TreeBackend) -> None:
        tree = backend.load(DOC)

        div = tree.find(tree.root, "div")

        assert tree.attribute(div, "xml:id") == "a"

    def test_find_returns_none_when_absent(self, backend: TreeBackend) -> None:
        tree = backend.load(DOC)

        assert tree.find(tree.root, "teiHeader") is None

    def test_find_excludes_node_itself(self, backend: TreeBackend) -> None:
        tree = backend.load("<div><p>x</p></div>")

        assert tree.find(tree.root, "div") is None

    def test_find_all_in_document_order(self, backend: TreeBackend) -> None:
        tree = backend.load(DOC)

        texts = [tree.text(d).strip()[:4] for d in tree.find_all(tree.root, "div")]

        assert texts == ["Alph", "Beta", "Gamm", "Delt"]

    def test_children_are_not_recursive(self, backend: TreeBackend) -> None:
        tree = backend.load(DOC)
        body = tree.find(tree.root, "body")

        top = tree.children(body, "div")
        nested = tree.children(top[0], "div")

        assert len(top) == 2
        assert len(nested) == 2
        assert tree.attribute(nested[0], "id") == "b"

    def test_attribute_lookup(self, backend: TreeBackend) -> None:
        tree = backend.load(DOC)
        div = tree.find(tree.root, "div")

        assert tree.attribute(tree.root, "xml:lang") == "fr"
        assert tree.attribute(div, "type") == "part"
        assert tree.attribute(div, "n") is None

    def test_matches_local_names_without_namespace(self, backend: TreeBackend) -> None:
        tree = backend.load(DOC.replace(' xmlns="http://www.tei-c.org/ns/1.0"', ""))

        assert len(tree.find_all(tree.root, "div")) == 4


class TestText:
    def test_full_text_concatenates_descendants(self, backend: TreeBackend) -> None:
        tree = backend.load("<a>one <b>two <c>three</c></b> four</a>")

        assert tree.text(tree.root) == "one two three four"

    def test_excluded_subtree_keeps_tail(self, backend: TreeBackend) -> None:
        tree = backend.load(DOC)
        outer = tree.find(tree.root, "div")

        text = " ".join(tree.text(outer, (Exclusion("div"),)).split())

        assert text == "Alpha one after-b Margin"

    def test_exclusion_does_not_apply_to_node_itself(
        self, backend: TreeBackend
    ) -> None:
        tree = backend.load("<div>Own<div>Nested</div></div>")

        assert tree.text(tree.root, (Exclusion("div"),)) == "Own"

    def test_exclusion_matches_attribute_value(self, backend: TreeBackend) -> None:
        tree = backend.load(DOC)
        outer = tree.find(tree.root, "div")

        text = tree.text(outer, (Exclusion("note", "place", "foot"),))

        assert "Foot" not in text
        assert "Margin" in text
        assert "tail-b" in text

    def test_exclusion_by_attribute_presence(self, backend: TreeBackend) -> None:
        tree = backend.load('<a>x<n type="t">y</n><n>z</n></a>')

        assert tree.text(tree.root, (Exclusion("n", "type"),)) == "xz"

    def test_several_exclusions(self, backend: TreeBackend) -> None:
        tree = backend.load(DOC)
        body = tree.find(tree.root, "body")

        text = tree.text(body, (Exclusion("note", "place", "foot"), Exclusion("pb")))

        assert "Foot" not in text
        assert "DeltaEpsilon" in text


class TestLoading:
    def test_accepts_bytes_with_declaration(self, backend: TreeBackend) -> None:
        raw = '<?xml version="1.0" encoding="UTF-8"?>\n<a>café</a>'.encode()

        tree = backend.load(raw)

        assert tree.text(tree.root) == "café"

    def test_accepts_str_with_declaration_after_whitespace(
        self, backend: TreeBackend
    ) -> None:
        tree = backend.load('\n  <?xml version="1.0" encoding="UTF-8"?><a>x</a>')

        assert tree.text(tree.root) == "x"

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "   \n\t ",
            "just some prose",
            "<TEI><text><body>",
            "<a><b></a>",
            b"",
        ],
    )
    def test_malformed_input_raises(self, backend: TreeBackend, raw: str) -> None:
        with pytest.raises(MalformedDocument):
            backend.load(raw)

    def test_malformed_document_is_value_error(self, backend: TreeBackend) -> None:
        with pytest.raises(ValueError):
            backend.load("<unterminated>")

    def test_malformed_chains_parser_error(self, backend: TreeBackend) -> None:
        with pytest.raises(MalformedDocument) as info:
            backend.load("<a>")

        assert info.value.__cause__ is not None


class TestDeclaredEncoding:
    DECLARED_LATIN1 = '<?xml version="1.0" encoding="ISO-8859-1"?><a>Café ß</a>'

    def test_str_input_ignores_declared_encoding(self, backend: TreeBackend) -> None:
        tree = backend.load(self.DECLARED_LATIN1)

        assert tree.text(tree.root) == "Café ß"

    def test_bytes_input_honours_declared_encoding(
        self, backend: TreeBackend
    ) -> None:
        tree = backend.load(self.DECLARED_LATIN1.encode("iso-8859-1"))

        assert tree.text(tree.root) == "Café ß"


class TestNestingDepth:
    def _nested(self, depth: int) -> str:
        return "<div>" + "<hi>" * depth + "x" + "</hi>" * depth + "tail</div>"

    def test_deep_but_allowed_nesting(self, backend: TreeBackend) -> None:
        tree = backend.load(self._nested(200))

        assert tree.text(tree.root) == "xtail"
        assert tree.text(tree.root, (Exclusion("hi"),)) == "tail"

    def test_excessive_nesting_rejected(self, backend: TreeBackend) -> None:
        with pytest.raises(MalformedDocument):
            backend.load(self._nested(1200))
