"""Generic child enumeration over tree-sitter JavaScript syntax trees.

Every node kind the JavaScript grammar produces is mapped to a fixed tuple of
child slots, so a caller can walk any tree without knowing in advance which
subtree holds the content it is after. Recursion is left to the caller.
"""

from collections import Counter

from jsscribe.models import Marker

UNKNOWN = "Unknown"
INVALID = "Invalid"
NULL = "Null"

NULL_NODE = Marker(NULL)

# Slot that expands to every named child, in source order.
NAMED = "<named>"

LEAVES = frozenset({
    "identifier",
    "property_identifier",
    "private_property_identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
    "statement_identifier",
    "number",
    "string",
    "regex",
    "true",
    "false",
    "null",
    "undefined",
    "this",
    "super",
    "import",
    "meta_property",
    "comment",
    "html_comment",
    "hash_bang_line",
    "empty_statement",
    "debugger_statement",
    "string_fragment",
    "escape_sequence",
    "jsx_text",
    "html_character_reference",
    UNKNOWN,
    INVALID,
    NULL,
})

# A slot is a field name (one child, NULL_NODE when absent), a tuple of
# alternative field names (first present wins), "*field" (every child in that
# field, possibly none), "#kind" (the first named child of that kind,
# NULL_NODE when absent) or NAMED.
CHILD_SLOTS: dict[str, tuple] = {
    # program and modules
    "program": (NAMED,),
    "export_statement": ("*decorator", NAMED),
    "import_statement": (NAMED,),
    "import_clause": (NAMED,),
    "named_imports": (NAMED,),
    "namespace_import": (NAMED,),
    "namespace_export": (NAMED,),
    "import_specifier": ("name", "alias"),
    "export_clause": (NAMED,),
    "export_specifier": ("name", "alias"),
    "import_attribute": (NAMED,),
    # declarations
    "variable_declaration": (NAMED,),
    "lexical_declaration": (NAMED,),
    "variable_declarator": ("name", "value"),
    "function_declaration": ("name", "parameters", "body"),
    "generator_function_declaration": ("name", "parameters", "body"),
    "class_declaration": ("*decorator", "name", "#class_heritage", "body"),
    "class_heritage": (NAMED,),
    "class_body": (NAMED,),
    "method_definition": ("*decorator", "name", "parameters", "body"),
    "field_definition": ("*decorator", "property", "value"),
    "class_static_block": ("body",),
    "decorator": (NAMED,),
    "decorator_member_expression": ("object", "property"),
    "decorator_call_expression": ("function", "arguments"),
    "decorator_parenthesized_expression": (NAMED,),
    # statements
    "expression_statement": (NAMED,),
    "statement_block": (NAMED,),
    "if_statement": ("condition", "consequence", "alternative"),
    "else_clause": (NAMED,),
    "switch_statement": ("value", "body"),
    "switch_body": (NAMED,),
    "switch_case": ("value", "*body"),
    "switch_default": ("*body",),
    "for_statement": ("initializer", "condition", "increment", "body"),
    "for_in_statement": ("left", "right", "body"),
    "while_statement": ("condition", "body"),
    "do_statement": ("body", "condition"),
    "try_statement": ("body", "handler", "finalizer"),
    "catch_clause": ("parameter", "body"),
    "finally_clause": ("body",),
    "with_statement": ("object", "body"),
    "labeled_statement": ("label", "body"),
    "break_statement": ("label",),
    "continue_statement": ("label",),
    "return_statement": (NAMED,),
    "throw_statement": (NAMED,),
    # functions
    "function_expression": ("name", "parameters", "body"),
    "function": ("name", "parameters", "body"),
    "generator_function": ("name", "parameters", "body"),
    "arrow_function": (("parameters", "parameter"), "body"),
    "formal_parameters": (NAMED,),
    # expressions
    "parenthesized_expression": (NAMED,),
    "sequence_expression": (NAMED,),
    "assignment_expression": ("left", "right"),
    "augmented_assignment_expression": ("left", "right"),
    "binary_expression": ("left", "right"),
    "unary_expression": ("argument",),
    "update_expression": ("argument",),
    "ternary_expression": ("condition", "consequence", "alternative"),
    "call_expression": ("function", "arguments"),
    "new_expression": ("constructor", "arguments"),
    "arguments": (NAMED,),
    "member_expression": ("object", "property"),
    "subscript_expression": ("object", "index"),
    "await_expression": (NAMED,),
    "yield_expression": (NAMED,),
    "spread_element": (NAMED,),
    "array": (NAMED,),
    "object": (NAMED,),
    "pair": ("key", "value"),
    "computed_property_name": (NAMED,),
    "class": ("*decorator", "name", "#class_heritage", "body"),
    "template_string": (NAMED,),
    "template_substitution": (NAMED,),
    # patterns
    "assignment_pattern": ("left", "right"),
    "object_pattern": (NAMED,),
    "array_pattern": (NAMED,),
    "rest_pattern": (NAMED,),
    "pair_pattern": ("key", "value"),
    "object_assignment_pattern": ("left", "right"),
    # jsx
    "jsx_element": ("open_tag", NAMED, "close_tag"),
    "jsx_self_closing_element": ("name", "*attribute"),
    "jsx_opening_element": ("name", "*attribute"),
    "jsx_closing_element": ("name",),
    "jsx_expression": (NAMED,),
    "jsx_attribute": (NAMED,),
    "jsx_namespace_name": (NAMED,),
    "nested_identifier": (NAMED,),
    "ERROR": (NAMED,),
}


def _named_children(node) -> list:
    return list(node.named_children)


def _fill_slot(node, slot) -> list:
    if slot == NAMED:
        return _named_children(node)
    if isinstance(slot, tuple):
        for field in slot:
            child = node.child_by_field_name(field)
            if child is not None:
                return [child]
        return [NULL_NODE]
    if slot.startswith("*"):
        return list(node.children_by_field_name(slot[1:]))
    if slot.startswith("#"):
        for child in node.named_children:
            if child.type == slot[1:]:
                return [child]
        return [NULL_NODE]
    child = node.child_by_field_name(slot)
    return [child if child is not None else NULL_NODE]


def get_children(node) -> list:
    """Return the children, if any, of a syntax tree node.

    Args:
        node: A tree-sitter node, a Marker, or None

    Returns:
        The node's children in a fixed order. Absent optional slots appear as
        NULL_NODE. None gives [NULL_NODE], a value with no ``type`` gives an
        Invalid marker and a kind missing from the table an Unknown marker.
    """
    if node is None:
        return [NULL_NODE]
    kind = getattr(node, "type", None)
    if not kind:
        return [Marker(INVALID, node)]
    if kind in LEAVES:
        return []

    slots = CHILD_SLOTS.get(kind)
    if slots is None:
        return [Marker(UNKNOWN, node)]

    children = []
    for slot in slots:
        children.extend(_fill_slot(node, slot))

    # A NAMED slot next to field slots repeats the field children.
    if NAMED in slots and len(slots) > 1:
        seen = set()
        unique = []
        for child in children:
            if not isinstance(child, Marker):
                key = (child.type, child.start_byte, child.end_byte)
                if key in seen:
                    continue
                seen.add(key)
            unique.append(child)
        children = unique

    return children


def iter_nodes(root):
    """Yield every node under root in pre-order, using an explicit stack."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(get_children(node)))


def find_unknown_kinds(root) -> Counter:
    """Count the node kinds under root that the slot table does not cover."""
    gaps = Counter()
    for node in iter_nodes(root):
        if isinstance(node, Marker) and node.type == UNKNOWN:
            gaps[node.body.type] += 1
    return gaps
