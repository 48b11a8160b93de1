from jsscribe.discovery import documentables, node_text
from jsscribe.parsers.javascript_parser import JavaScriptParser

EXAMPLE = """class Greeter {
    hello(name) {
        return "hi "+name;
    }
}
function add(a,b) { return a+b; }
const mul = (a,b) => a*b;
"""


def discover(source, **kwargs):
    return documentables(JavaScriptParser().parse(source), **kwargs)


def names(entities):
    return [node_text(e.node.child_by_field_name("name")) for e in entities]


def test_example_order():
    entities = discover(EXAMPLE)

    assert [e.kind for e in entities] == ["class", "method", "function", "variable"]
    assert names(entities) == ["Greeter", "hello", "add", "mul"]


def test_method_carries_enclosing_class():
    entities = discover(EXAMPLE)

    assert entities[0].enclosing_class is None
    assert entities[1].enclosing_class == "Greeter"
    assert entities[2].enclosing_class is None


def test_variable_carries_declaration_keyword():
    entities = discover("var a = function() {};\nlet b = () => 1;\nconst c = async () => 2;\n")

    assert [e.declaration_keyword for e in entities] == ["var", "let", "const"]
    assert all(e.kind == "variable" for e in entities)


def test_only_function_valued_declarators():
    entities = discover("let f = function() {}, g = 2, h = () => 1, i;\n")

    assert names(entities) == ["f", "h"]
    assert all(e.declaration_keyword == "let" for e in entities)


def test_non_function_variables_skipped():
    assert discover("const x = 1;\nconst y = { m() {} };\n") == []


def test_nested_functions_are_not_discovered():
    entities = discover("function outer() {\n  function inner() {}\n  const f = () => 1;\n}\n")

    assert names(entities) == ["outer"]


def test_generator_function_declaration():
    entities = discover("function* gen() { yield 1; }\n")

    assert len(entities) == 1
    assert entities[0].kind == "function"


def test_all_method_shapes_recorded():
    source = """class Shape {
    constructor(w) { this.w = w; }
    get width() { return this.w; }
    set width(v) { this.w = v; }
    static unit() { return new Shape(1); }
}
"""
    entities = discover(source)

    methods = [e for e in entities if e.kind == "method"]
    assert names(methods) == ["constructor", "width", "width", "unit"]


def test_class_fields_are_not_methods():
    entities = discover("class A {\n  x = 1;\n  m() {}\n}\n")

    assert [e.kind for e in entities] == ["class", "method"]


def test_classes_and_methods_interleave_in_source_order():
    entities = discover("class A { a() {} }\nfunction f() {}\nclass B { b() {} }\n")

    assert names(entities) == ["A", "a", "f", "B", "b"]


def test_exported_declarations():
    source = "export function f() {}\nexport const g = () => 1;\nexport class W { render() {} }\n"

    entities = discover(source)

    assert names(entities) == ["f", "g", "W", "render"]


def test_exports_can_be_ignored():
    entities = discover("export function f() {}\nfunction g() {}\n", include_exports=False)

    assert names(entities) == ["g"]


def test_empty_program():
    assert discover("") == []


def test_statements_are_skipped():
    assert discover("if (x) { function hidden() {} }\nfor (;;) { break; }\n") == []
