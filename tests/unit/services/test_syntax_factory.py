"""Unit tests for SyntaxFactory."""

from __future__ import annotations

from schemaforge.bundle import default_bundle
from schemaforge.services.syntax_factory import SyntaxFactory
from schemaforge.syntax.validator import SyntaxValidator


class TestGetValidator:
    def test_collects_checkers_in_bundle_order(self, factory, make_context):
        syntax = SyntaxFactory(default_bundle())
        validator = syntax.get_validator(make_context(factory, {"required": ["a"], "type": "object"}))

        assert isinstance(validator, SyntaxValidator)
        assert [checker.keyword for checker in validator.checkers] == ["type", "required"]

    def test_unknown_keywords_ignored(self, factory, make_context):
        syntax = SyntaxFactory(default_bundle())
        validator = syntax.get_validator(make_context(factory, {"title": 3, "x-foo": None}))
        assert validator.checkers == ()

    def test_non_object_schema_fails_on_validate(self, factory, make_context):
        syntax = SyntaxFactory(default_bundle())
        context = make_context(factory, "string")
        report = syntax.get_validator(context).validate(context, "string")

        assert report.success is False
        assert report.messages[0].message == "schema is not an object (found string)"

    def test_unregistered_keyword_not_checked(self, factory, make_context):
        bundle = default_bundle()
        bundle.unregister_keyword("minLength")
        syntax = SyntaxFactory(bundle)
        context = make_context(factory, {"minLength": "many"})

        assert syntax.get_validator(context).validate(context, context.schema).success
