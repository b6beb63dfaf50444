"""Tests for effect and callback fact extraction."""

from __future__ import annotations

from hookflow.analyzer.effects import extract_callback_facts, extract_effect_facts
from hookflow.analyzer.parser import parse_source
from hookflow.analyzer.syntax import field, text, walk
from hookflow.config import AnalyzerConfig


def _first_call(code: str, callee: str):
    root = parse_source(code, "Effect.tsx").root_node
    for node in walk(root):
        if node.type == "call_expression" and text(field(node, "function")) == callee:
            return node
    raise AssertionError(f"no call to {callee}")


class TestEffectDependencies:
    def test_identifier_dependencies(self):
        call = _first_call("useEffect(() => {}, [count, user]);", "useEffect")
        assert extract_effect_facts(call).dependencies == ["count", "user"]

    def test_non_identifier_elements_skipped(self):
        call = _first_call("useEffect(() => {}, [props.id, items[0], count, 1 + 2]);", "useEffect")
        assert extract_effect_facts(call).dependencies == ["count"]

    def test_no_dependency_array(self):
        call = _first_call("useEffect(() => {});", "useEffect")
        assert extract_effect_facts(call).dependencies == []

    def test_dependency_variable_is_not_an_array_literal(self):
        call = _first_call("useEffect(() => {}, deps);", "useEffect")
        assert extract_effect_facts(call).dependencies == []

    def test_duplicate_dependencies_collapse(self):
        call = _first_call("useEffect(() => {}, [a, b, a]);", "useEffect")
        assert extract_effect_facts(call).dependencies == ["a", "b"]

    def test_no_arguments(self):
        call = _first_call("useEffect();", "useEffect")
        facts = extract_effect_facts(call)
        assert facts.dependencies == [] and facts.setters == [] and facts.refs == []


class TestEffectMutations:
    def test_setters_in_first_seen_order_deduplicated(self):
        call = _first_call('''
useEffect(() => {
  setB(1);
  setA(2);
  setB(3);
}, []);
''', "useEffect")
        assert extract_effect_facts(call).setters == ["setB", "setA"]

    def test_setters_inside_nested_closures(self):
        call = _first_call('''
useEffect(() => {
  const id = window.setInterval(() => {
    fetchData().then((res) => setData(res));
  }, 1000);
  return () => window.clearInterval(id);
}, []);
''', "useEffect")
        assert extract_effect_facts(call).setters == ["setData"]

    def test_bare_timer_calls_match_setter_pattern(self):
        # Naming convention only: setTimeout looks exactly like a setter
        call = _first_call("useEffect(() => { setTimeout(() => setOpen(false), 10); }, []);", "useEffect")
        assert extract_effect_facts(call).setters == ["setTimeout", "setOpen"]

    def test_expression_body_is_scanned(self):
        call = _first_call("useEffect(() => setReady(true), []);", "useEffect")
        assert extract_effect_facts(call).setters == ["setReady"]

    def test_function_expression_callback(self):
        call = _first_call("useEffect(function () { setOpen(false); }, []);", "useEffect")
        assert extract_effect_facts(call).setters == ["setOpen"]

    def test_not_a_setter(self):
        call = _first_call("useEffect(() => { setup(); settings(); obj.setValue(1); }, []);", "useEffect")
        assert extract_effect_facts(call).setters == []

    def test_mutate_methods(self):
        call = _first_call('''
useEffect(() => {
  saveMutation.mutate(data);
  deleteMutation.mutateAsync(id);
  saveMutation.mutate(other);
}, [data]);
''', "useEffect")
        assert extract_effect_facts(call).setters == ["saveMutation.mutate", "deleteMutation.mutateAsync"]

    def test_mutate_on_member_object_ignored(self):
        call = _first_call("useEffect(() => { api.save.mutate(1); }, []);", "useEffect")
        assert extract_effect_facts(call).setters == []

    def test_configured_mutate_methods(self):
        call = _first_call("useEffect(() => { store.dispatch(a); }, []);", "useEffect")
        config = AnalyzerConfig(mutate_methods=("dispatch",))
        assert extract_effect_facts(call, config).setters == ["store.dispatch"]


class TestEffectRefs:
    def test_ref_member_access(self):
        call = _first_call('''
useEffect(() => {
  inputRef.current.focus();
  timerRef.current = 1;
  inputRef.current.blur();
}, []);
''', "useEffect")
        assert extract_effect_facts(call).refs == ["inputRef", "timerRef"]

    def test_plain_ref_identifier_not_recorded(self):
        call = _first_call("useEffect(() => { observe(inputRef); }, []);", "useEffect")
        assert extract_effect_facts(call).refs == []

    def test_ref_suffix_is_case_sensitive(self):
        call = _first_call("useEffect(() => { inputref.current = 1; }, []);", "useEffect")
        assert extract_effect_facts(call).refs == []


class TestCallbacks:
    def test_bound_name_and_dependencies(self):
        call = _first_call('''
const handleClick = useCallback(() => {
  setCount((c) => c + step);
}, [step, step]);
''', "useCallback")
        facts = extract_callback_facts(call)
        assert facts.name == "handleClick"
        assert facts.dependencies == ["step"]
        assert facts.setters == ["setCount"]

    def test_unbound_callback_has_no_name(self):
        call = _first_call("register(useCallback(() => setOpen(true), []));", "useCallback")
        facts = extract_callback_facts(call)
        assert facts.name is None
        assert facts.setters == ["setOpen"]

    def test_mutate_is_not_a_callback_mutation(self):
        call = _first_call("const save = useCallback(() => { m.mutate(1); }, [m]);", "useCallback")
        assert extract_callback_facts(call).setters == []

    def test_destructured_binding_has_no_name(self):
        call = _first_call("const [cb] = [useCallback(() => {}, [])];", "useCallback")
        assert extract_callback_facts(call).name is None
