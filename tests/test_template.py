# -*- coding: utf-8 -*-
"""Public surface: UriTemplate, module shortcuts, adapters and the engine."""
from __future__ import annotations

import pickle
import threading
import unittest
from collections import OrderedDict
from decimal import Decimal
from unittest.mock import patch

import pytest

import urikit
from urikit import (
    AssocValue,
    ExpansionConfig,
    ListValue,
    MappingVariables,
    PairVariables,
    Rfc6570TemplateEngine,
    StringValue,
    UriTemplate,
    ValueCoercionError,
    assoc_value,
    coerce_value,
    list_value,
    string_value,
)
from urikit.adapters.variables import ChainVariables, as_variables
from urikit.core.interfaces import TemplateEngineProtocol, VariablesProtocol
from urikit.core.models import EXPLODE, Literal


# --------------------------------------------------------------------------- #
#  1. Documented scenarios                                                    #
# --------------------------------------------------------------------------- #
@pytest.mark.parametrize(
    "template, bindings, expected",
    [
        ("{var}", {"var": "value"}, "value"),
        ("{hello}", {"hello": "Hello World!"}, "Hello%20World%21"),
        ("{+hello}", {"hello": "Hello World!"}, "Hello%20World!"),
        ("{;list*}", {"list": ["red", "green", "blue"]}, ";list=red;list=green;list=blue"),
        (
            "{?keys*}",
            {"keys": assoc_value([("semi", ";"), ("dot", "."), ("comma", ",")])},
            "?semi=%3B&dot=.&comma=%2C",
        ),
        ("{x:1y}", {}, "{x:1y}"),
    ],
)
def test_documented_scenarios(template, bindings, expected):
    assert urikit.expand(template, bindings) == expected


@pytest.mark.parametrize("text", ["", "plain", "a b c", "50%", "%zz}", "ü/ö?x=1&y"])
def test_text_without_braces_passes_through(text):
    assert urikit.parse(text).expand() == text


@pytest.mark.parametrize("body", ["", "!x", "x,,y", "x:0", "x:1*", "%0", "?~", "a b"])
def test_invalid_expression_round_trips(body):
    tpl = "{" + body + "}"
    assert urikit.expand(tpl, {"x": "X", "y": "Y"}) == tpl


# --------------------------------------------------------------------------- #
#  2. UriTemplate object                                                      #
# --------------------------------------------------------------------------- #
class UriTemplateTests(unittest.TestCase):
    def test_reuse_with_different_bindings(self) -> None:
        tpl = UriTemplate.parse("/repos{/owner,repo}{?page}")
        self.assertEqual(tpl.expand(owner="octo", repo="kit"), "/repos/octo/kit")
        self.assertEqual(tpl.expand({"owner": "a"}, page=2), "/repos/a?page=2")
        self.assertEqual(tpl.expand([("repo", "r"), ("repo", "ignored")]), "/repos/r")

    def test_kwargs_override_mapping(self) -> None:
        tpl = UriTemplate.parse("{x}")
        self.assertEqual(tpl.expand({"x": "a"}, x="b"), "b")

    def test_variable_named_variables(self) -> None:
        self.assertEqual(UriTemplate.parse("{variables}").expand(variables="v"), "v")

    def test_introspection(self) -> None:
        tpl = UriTemplate.parse("a{x,y}{+x}{!bad}{z*}")
        self.assertEqual(tpl.variable_names, ("x", "y", "z"))
        self.assertEqual(len(tpl.expressions), 3)
        self.assertEqual(len(tpl), 5)
        self.assertIn(Literal("{!bad}"), list(tpl))
        self.assertIs(tpl.expressions[2].variables[0].modifier, EXPLODE)

    def test_str_and_repr(self) -> None:
        src = "http://h{/p*}{?q,r:3}#{!x"
        tpl = UriTemplate.parse(src)
        self.assertEqual(str(tpl), src)
        self.assertEqual(repr(tpl), f"UriTemplate({src!r})")

    def test_equality_and_hash(self) -> None:
        a, b = UriTemplate.parse("{x}y"), UriTemplate.parse("{x}y")
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, UriTemplate.parse("{x}z"))
        self.assertNotEqual(a, "{x}y")

    def test_items_pickle(self) -> None:
        tpl = UriTemplate.parse("{a*}{b:2}")
        self.assertEqual(pickle.loads(pickle.dumps(tpl.items)), tpl.items)

    def test_config_flows_into_expansion(self) -> None:
        tpl = UriTemplate.parse("a b{x}", config=ExpansionConfig(encode_literals=True))
        self.assertTrue(tpl.config.encode_literals)
        self.assertEqual(tpl.expand(x="1"), "a%20b1")

    def test_concurrent_expansion(self) -> None:
        tpl = UriTemplate.parse("{/n}{?n}")
        results: dict = {}

        def work(i: int) -> None:
            results[i] = tpl.expand(n=str(i))

        threads = [threading.Thread(target=work, args=(i,)) for i in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(results, {i: f"/{i}?n={i}" for i in range(16)})


# --------------------------------------------------------------------------- #
#  3. Expander builder                                                        #
# --------------------------------------------------------------------------- #
class ExpanderTests(unittest.TestCase):
    def test_chained_setters(self) -> None:
        out = (
            UriTemplate.parse("{x}{?y*}{&z}")
            .expander()
            .set_string("x", "X")
            .set_assoc("y", [("a", "1"), ("a", "2")])
            .set_list("z", ["p", "q"])
            .expand()
        )
        self.assertEqual(out, "X?a=1&a=2&z=p,q")

    def test_set_assoc_from_mapping_and_unset(self) -> None:
        exp = UriTemplate.parse("{.m*}").expander().set_assoc("m", OrderedDict([("k", "v")]))
        self.assertEqual(exp.expand(), ".k=v")
        self.assertEqual(exp.unset("m").expand(), "")

    def test_builder_does_not_leak_between_expanders(self) -> None:
        tpl = UriTemplate.parse("{x}")
        tpl.expander().set_string("x", "1")
        self.assertEqual(tpl.expander().expand(), "")


# --------------------------------------------------------------------------- #
#  4. Lookup adapters                                                         #
# --------------------------------------------------------------------------- #
class AdapterTests(unittest.TestCase):
    def test_coerce_scalars(self) -> None:
        self.assertEqual(coerce_value("a"), StringValue("a"))
        self.assertEqual(coerce_value(3), StringValue("3"))
        self.assertEqual(coerce_value(1.5), StringValue("1.5"))
        self.assertEqual(coerce_value(Decimal("2.50")), StringValue("2.50"))
        self.assertEqual(coerce_value(True), StringValue("true"))
        self.assertIsNone(coerce_value(None))

    def test_coerce_composites(self) -> None:
        self.assertEqual(coerce_value(["a", 1]), ListValue(("a", "1")))
        self.assertEqual(coerce_value(("a",)), ListValue(("a",)))
        self.assertEqual(coerce_value({"k": "v", "n": 2}), AssocValue((("k", "v"), ("n", "2"))))
        value = list_value(["x"])
        self.assertIs(coerce_value(value), value)

    def test_coerce_rejects_unknown(self) -> None:
        for bad in [object(), {"a": ["nested"]}, [["nested"]], {1, 2}]:
            with self.subTest(bad=bad):
                with self.assertRaises(ValueCoercionError) as cm:
                    coerce_value(bad, name="v")
                self.assertIn("'v'", str(cm.exception))
        self.assertTrue(issubclass(ValueCoercionError, TypeError))

    def test_pair_variables_first_match_wins(self) -> None:
        lookup = PairVariables([("a", "1"), ("b", "2"), ("a", "3")])
        self.assertEqual(lookup.get("a"), string_value("1"))
        self.assertIsNone(lookup.get("zzz"))

    def test_chain_variables(self) -> None:
        lookup = ChainVariables(MappingVariables({"a": None}), MappingVariables({"a": "x", "b": "y"}))
        self.assertEqual(lookup.get("a"), string_value("x"))
        self.assertEqual(lookup.get("b"), string_value("y"))
        self.assertIsNone(lookup.get("c"))

    def test_as_variables_accepts_protocol_objects(self) -> None:
        class _Custom:
            def get(self, name: str):
                return string_value(name.upper())

        custom = _Custom()
        self.assertIsInstance(custom, VariablesProtocol)
        self.assertIs(as_variables(custom), custom)
        self.assertEqual(UriTemplate.parse("{abc}").expand(custom), "ABC")

    def test_as_variables_rejects_other_objects(self) -> None:
        with self.assertRaises(ValueCoercionError):
            as_variables(42)


# --------------------------------------------------------------------------- #
#  5. Template engine                                                         #
# --------------------------------------------------------------------------- #
class EngineTests(unittest.TestCase):
    def test_engine_satisfies_protocol(self) -> None:
        self.assertIsInstance(Rfc6570TemplateEngine(config=ExpansionConfig()), TemplateEngineProtocol)

    def test_render(self) -> None:
        engine = Rfc6570TemplateEngine(config=ExpansionConfig())
        self.assertEqual(engine.render("/u{/id}{?fields*}", {"id": 7, "fields": ["a", "b"]}), "/u/7?fields=a&fields=b")

    def test_parse_cache(self) -> None:
        engine = Rfc6570TemplateEngine(config=ExpansionConfig(parse_cache_size=4))
        first = engine.parse("{x}")
        self.assertIs(engine.parse("{x}"), first)
        info = engine.cache_info()
        self.assertEqual((info.hits, info.misses, info.maxsize), (1, 1, 4))

    def test_render_bad_binding_returns_template(self) -> None:
        engine = Rfc6570TemplateEngine(config=ExpansionConfig())
        with self.assertLogs("urikit.templates", level="ERROR"):
            self.assertEqual(engine.render("{x}", {"x": object()}), "{x}")

    def test_engine_reads_env_when_no_config(self) -> None:
        with patch.dict("os.environ", {"URIKIT_ENCODE_LITERALS": "1"}):
            engine = Rfc6570TemplateEngine()
        self.assertTrue(engine.config.encode_literals)
        self.assertEqual(engine.render("a b", {}), "a%20b")


if __name__ == "__main__":
    unittest.main()
