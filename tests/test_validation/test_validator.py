"""Tests for statement validation."""

import pytest

from cygen.errors import PlaceholderSyntaxError
from cygen.patterns import iter_templates
from cygen.validation import (
    DiagnosticMatcher,
    StatementValidator,
    create_statement_validator,
)


@pytest.fixture
def validator():
    """Create validator instance."""
    return create_statement_validator()


class TestValidStatements:
    """Statements made only of recognised placeholders never raise."""
    
    @pytest.mark.parametrize("statement", [
        "<visit_url http://example.com>",
        "<input_username value bob>",
        "<click_#go> and then <click_#next>",
        "<if_end>",
        "<end>",
        "plain prose with no placeholders",
        "<action_uncheck #terms>",
    ])
    def test_valid(self, validator, statement):
        validator.validate(statement)
        assert validator.check(statement).valid
    
    def test_only_outer_shape_is_checked(self, validator):
        """A recognised family with an unknown argument still passes."""
        validator.validate("<visit_homepage>")
    
    def test_validate_all(self, validator):
        validator.validate_all(["<click_#a>", "<assert_#t has text Hi>"])
    
    def test_child_combinator_is_one_token(self, validator):
        """A ">" inside the argument belongs to the token."""
        validator.validate("<click_ul > li>")
        
        result = validator.check("<clck_ul > li>")
        assert [e.token for e in result.errors] == ["<clck_ul > li>"]


class TestInvalidStatements:
    """Unrecognised tokens raise with the statement and a suggestion."""
    
    def test_unknown_family_raises(self, validator):
        with pytest.raises(PlaceholderSyntaxError) as exc_info:
            validator.validate("<clck_#go>")
        
        error = exc_info.value
        assert error.statement == "<clck_#go>"
        assert error.token == "<clck_#go>"
        assert '"<clck_#go>"' in str(error)
    
    def test_message_names_close_template(self, validator):
        statement = "<asert_[css_name] has text [text]>"
        with pytest.raises(PlaceholderSyntaxError) as exc_info:
            validator.validate(statement)
        
        error = exc_info.value
        assert error.suggestion.template == "<assert_[css_name] has text [text]>"
        assert str(error) == (
            f'Invalid syntax found in statement: "{statement}". '
            'Did you mean: "<assert_[css_name] has text [text]>"?'
        )
    
    def test_message_without_suggestion(self, validator):
        statement = "<bogus_" + "x" * 30 + ">"
        with pytest.raises(PlaceholderSyntaxError) as exc_info:
            validator.validate(statement)
        
        assert exc_info.value.suggestion is None
        assert str(exc_info.value) == f'Invalid placeholder found in statement: "{statement}"'
    
    def test_each_token_checked(self, validator):
        """A bad token after a good one is still caught."""
        with pytest.raises(PlaceholderSyntaxError) as exc_info:
            validator.validate("<click_#ok> <nope>")
        assert exc_info.value.token == "<nope>"
    
    def test_validate_all_fails_fast(self, validator):
        with pytest.raises(PlaceholderSyntaxError) as exc_info:
            validator.validate_all(["<click_#a>", "<bad_one>", "<worse>"])
        assert exc_info.value.token == "<bad_one>"
    
    def test_check_collects_all_tokens(self, validator):
        result = validator.check("<bad_one> <click_#a> <worse>")
        assert not result.valid
        assert [e.token for e in result.errors] == ["<bad_one>", "<worse>"]
    
    def test_suggestion_never_changes_outcome(self):
        """Even with no templates to suggest, the failure stands."""
        validator = StatementValidator(matcher=DiagnosticMatcher(templates=[]))
        with pytest.raises(PlaceholderSyntaxError):
            validator.validate("<asert_[css_name] has text [text]>")


class TestTemplatesThemselves:
    """Registry templates pass shape validation."""
    
    @pytest.mark.parametrize("template", iter_templates())
    def test_template_validates(self, validator, template):
        validator.validate(template)
