"""
Tests for scope contexts and type name resolution.
"""

from __future__ import annotations

from declaration_metadata.config import BuilderConfig
from declaration_metadata.context import BuilderContext
from declaration_metadata.ir_nodes import TypeReference, type_ref
from declaration_metadata.type_handles import TypeHandle, mint_anonymous


class TestResolution:
    """Tests for resolve_one and resolve_many."""

    def test_unknown_name_passes_through(self):
        ctx = BuilderContext("app/user")
        ref = type_ref("Missing")
        assert ctx.resolve_one(ref) is ref

    def test_resolved_handle_passes_through(self):
        ctx = BuilderContext("app/user")
        ref = TypeReference(mint_anonymous("External"))
        assert ctx.resolve_one(ref) is ref

    def test_declared_name_resolves_to_handle(self):
        ctx = BuilderContext("app/user")
        handle = ctx.declare_nominal("User")
        ref = type_ref("User")

        resolved = ctx.resolve_one(ref)

        assert resolved is not ref
        assert resolved.identifier is handle
        # The caller's reference is left untouched
        assert ref.identifier == "User"

    def test_type_parameters_resolved_recursively(self):
        ctx = BuilderContext("app/user")
        box = ctx.declare_nominal("Box")
        item = ctx.declare_nominal("Item")

        resolved = ctx.resolve_one(type_ref("Box", type_ref("Box", "Item"), "Unknown"))

        assert resolved.identifier is box
        inner, unknown = resolved.type_parameters
        assert inner.identifier is box
        assert inner.type_parameters[0].identifier is item
        assert unknown.identifier == "Unknown"

    def test_unresolved_outer_keeps_type_parameters_verbatim(self):
        ctx = BuilderContext("app/user")
        ctx.declare_nominal("Item")
        ref = type_ref("Array", "Item")

        resolved = ctx.resolve_one(ref)

        assert resolved is ref
        assert resolved.type_parameters[0].identifier == "Item"

    def test_resolve_many_none(self):
        ctx = BuilderContext("app/user")
        assert ctx.resolve_many(None) is None

    def test_resolve_many_element_wise(self):
        ctx = BuilderContext("app/user")
        handle = ctx.declare_nominal("A")

        resolved = ctx.resolve_many([type_ref("A"), type_ref("B")])

        assert [r.identifier for r in resolved] == [handle, "B"]


class TestDeclarations:
    """Tests for declare_nominal and declare_type_param."""

    def test_nominal_handle_is_scoped_by_module_path(self):
        ctx = BuilderContext("app/user")
        handle = ctx.declare_nominal("User")
        assert handle.name == "User"
        assert handle.scope == "app/user"
        assert handle.qualified_name == "app/user::User"

    def test_nominal_uses_configured_separator(self):
        ctx = BuilderContext("app/user", config=BuilderConfig(scope_separator="."))
        assert ctx.declare_nominal("User").qualified_name == "app/user.User"

    def test_redeclaring_nominal_mints_new_handle(self):
        ctx = BuilderContext("app/user")
        first = ctx.declare_nominal("User")
        second = ctx.declare_nominal("User")
        assert first != second
        assert ctx.lookup("User") is second

    def test_type_param_from_name(self):
        ctx = BuilderContext("app/user")
        handle = ctx.declare_type_param("T")
        assert isinstance(handle, TypeHandle)
        assert handle.name == "T"
        assert handle.scope is None
        assert ctx.lookup("T") is handle

    def test_type_param_from_existing_handle(self):
        ctx = BuilderContext("app/user")
        existing = mint_anonymous("K")
        assert ctx.declare_type_param(existing) is existing
        assert ctx.resolve_one(type_ref("K")).identifier is existing

    def test_declare_type_params_bulk(self):
        ctx = BuilderContext("app/user")
        handles = ctx.declare_type_params(["K", "V"])
        assert [h.name for h in handles] == ["K", "V"]
        assert ctx.declare_type_params(None) == []


class TestFork:
    """Tests for lexical scoping through forked contexts."""

    def test_child_binding_does_not_leak_to_parent(self):
        parent = BuilderContext("app/user")
        child = parent.fork()
        child.declare_type_param("T")

        assert parent.lookup("T") is None
        assert parent.resolve_one(type_ref("T")).identifier == "T"

    def test_child_binding_does_not_leak_to_sibling(self):
        parent = BuilderContext("app/user")
        first = parent.fork()
        second = parent.fork()
        first.declare_type_param("T")

        assert second.lookup("T") is None

    def test_enclosing_binding_visible_from_descendants(self):
        root = BuilderContext("app/user")
        handle = root.declare_nominal("User")
        grandchild = root.fork().fork()

        assert grandchild.resolve_one(type_ref("User")).identifier is handle

    def test_shadowing(self):
        parent = BuilderContext("app/user")
        outer = parent.declare_type_param("T")
        child = parent.fork()
        inner = child.declare_type_param("T")

        assert inner != outer
        assert child.resolve_one(type_ref("T")).identifier is inner
        assert parent.resolve_one(type_ref("T")).identifier is outer

    def test_live_delegation(self):
        parent = BuilderContext("app/user")
        child = parent.fork()
        # Declared after the fork
        handle = parent.declare_nominal("Late")

        assert child.resolve_one(type_ref("Late")).identifier is handle

    def test_fork_keeps_module_path_and_config(self):
        config = BuilderConfig(scope_separator="/")
        parent = BuilderContext("app/user", config=config)
        child = parent.fork()

        assert child.module_path == "app/user"
        assert child.config is config
        assert child.parent is parent

    def test_depth_and_local_bindings(self):
        parent = BuilderContext("app/user")
        parent.declare_nominal("User")
        child = parent.fork()

        assert parent.depth == 0
        assert child.depth == 1
        assert parent.is_bound_locally("User")
        assert not child.is_bound_locally("User")
