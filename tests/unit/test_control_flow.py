"""Tests for the control-flow passes: conditional, each and case."""

from __future__ import annotations

import pytest

from molosser.context import CompilationContext
from molosser.jsx import OutputKind
from molosser.passes import CaseTransformer, CodeTransformer, ConditionalTransformer, EachTransformer
from molosser.template import (
    BlockNode,
    CaseNode,
    CodeNode,
    ConditionalNode,
    EachNode,
    TagNode,
    TextNode,
    WhenNode,
)


def _run(transformer_cls, node, **options):
    context = CompilationContext()
    transformer = transformer_cls(node, context, **options)
    transformer.transform()
    return transformer.output, context


def _block(*texts: str) -> BlockNode:
    return BlockNode(nodes=[TextNode(val=t) for t in texts])


class TestConditional:
    def test_if_without_else_has_null_alternate(self):
        output, _ = _run(ConditionalTransformer, ConditionalNode(test="ok", consequent=_block("yes")))
        consequent, alternate = output.children
        assert output.value == "ok"
        assert consequent.kind == OutputKind.JSX_FRAGMENT
        assert consequent.children[0].value == "yes"
        assert alternate.kind == OutputKind.NULL
        assert str(output) == "(ok) ? <>yes</> : null"

    def test_else_block_becomes_fragment(self):
        node = ConditionalNode(test="ok", consequent=_block("yes"), alternate=_block("no"))
        output, _ = _run(ConditionalTransformer, node)
        assert output.children[1].kind == OutputKind.JSX_FRAGMENT
        assert output.children[1].children[0].value == "no"

    def test_else_if_chain_nests_conditionals(self):
        node = ConditionalNode(
            test="a",
            consequent=_block("A"),
            alternate=ConditionalNode(test="b", consequent=_block("B"), alternate=_block("C")),
        )
        output, _ = _run(ConditionalTransformer, node)
        nested = output.children[1]
        assert nested.kind == OutputKind.CONDITIONAL
        assert nested.value == "b"
        assert str(output) == "(a) ? <>A</> : (b) ? <>B</> : <>C</>"

    def test_branch_diagnostics_reach_shared_sink(self):
        node = ConditionalNode(test="a", consequent=BlockNode(nodes=[TagNode(name="body")]))
        output, context = _run(ConditionalTransformer, node)
        assert output.children[0].children == []
        assert len(context.sink.errors) == 1


class TestEach:
    def test_value_only(self):
        node = EachNode(obj="items", val="item", block=_block("x"))
        output, _ = _run(EachTransformer, node)
        assert output.kind == OutputKind.ITERATION
        assert output.value == "items"
        assert output.params == ["item"]
        assert len(output.children) == 1
        assert str(output) == "(items).map((item) => <>x</>)"

    def test_value_and_key(self):
        output, _ = _run(EachTransformer, EachNode(obj="items", val="item", key="i"))
        assert output.params == ["item", "i"]

    def test_else_block_is_second_child(self):
        node = EachNode(obj="items", val="item", block=_block("x"), alternate=_block("none"))
        output, _ = _run(EachTransformer, node)
        assert len(output.children) == 2
        assert output.children[1].children[0].value == "none"
        assert str(output).startswith("(items).length ? ")


class TestCase:
    def test_when_branches_become_cases(self):
        node = CaseNode(
            expr="n",
            block=BlockNode(
                nodes=[
                    WhenNode(expr="1", block=_block("one")),
                    WhenNode(expr="2"),
                    WhenNode(expr="3", block=_block("few")),
                    WhenNode(expr="default", block=_block("many")),
                ]
            ),
        )
        output, context = _run(CaseTransformer, node)
        assert output.kind == OutputKind.SWITCH
        assert output.value == "n"
        assert [c.value for c in output.children] == ["1", "2", "3", None]
        assert output.children[1].children == []
        assert len(context.sink) == 0

    def test_non_when_child_is_fatal(self):
        node = CaseNode(expr="n", block=BlockNode(nodes=[WhenNode(expr="1"), TextNode(val="x")]))
        output, context = _run(CaseTransformer, node)
        assert output is None
        assert context.sink.errors[0].reasons == ["node type Text is not supported inside case"]

    def test_duplicate_default_is_fatal(self):
        node = CaseNode(
            expr="n",
            block=BlockNode(nodes=[WhenNode(expr="default"), WhenNode(expr="default")]),
        )
        output, context = _run(CaseTransformer, node)
        assert output is None
        assert len(context.sink.errors) == 1


class TestCode:
    def test_expression(self):
        output, _ = _run(CodeTransformer, CodeNode(val=" a + b ", buffer=True), is_expression=True)
        assert len(output) == 1
        assert output[0].kind == OutputKind.JSX_EXPRESSION
        assert output[0].value == "a + b"

    def test_statement(self):
        output, _ = _run(CodeTransformer, CodeNode(val="const a = 1"), is_expression=False)
        assert output[0].kind == OutputKind.STATEMENT

    def test_blank_code_has_no_output(self):
        output, context = _run(CodeTransformer, CodeNode(val="   "), is_expression=True)
        assert output is None
        assert len(context.sink) == 0

    def test_code_with_block_is_fatal(self):
        node = CodeNode(val="if (a)", block=_block("x"))
        output, context = _run(CodeTransformer, node)
        assert output is None
        assert context.sink.errors[0].reasons == ["code blocks are not supported"]

    def test_unknown_option_is_rejected(self):
        with pytest.raises(TypeError, match="no option"):
            CodeTransformer(CodeNode(val="a"), CompilationContext(), is_top_level=True)
