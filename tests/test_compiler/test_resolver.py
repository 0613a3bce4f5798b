"""Tests for statement resolution."""

import pytest

from cygen.vocabulary import FamilyTag
from cygen.patterns import get_family
from cygen.compiler import StatementResolver, create_resolver


@pytest.fixture
def resolver():
    return create_resolver()


class TestResolve:
    """Tests for placeholder replacement."""
    
    def test_single_placeholder(self, resolver):
        assert resolver.resolve_text("<visit_url http://x>") == "cy.visit('http://x')"
    
    def test_prose_untouched(self, resolver):
        assert resolver.resolve_text("// then <click_#go> now") == (
            "// then cy.get('#go').click() now"
        )
    
    def test_several_placeholders(self, resolver):
        result = resolver.resolve("<click_#a>; <input_name value Ann>; <click_#b>")
        assert result.text == (
            "cy.get('#a').click(); "
            "cy.get('input.name').type('Ann'); "
            "cy.get('#b').click()"
        )
        assert result.complete
    
    def test_end_marker_renders_empty(self, resolver):
        assert resolver.resolve_text("<end>") == ""
    
    def test_no_placeholders(self, resolver):
        result = resolver.resolve("nothing to do")
        assert result.text == "nothing to do"
        assert result.unresolved == ()
    
    def test_child_combinator_selector(self, resolver):
        """A ">" inside the argument doesn't end the placeholder."""
        result = resolver.resolve("<click_ul > li>")
        assert result.text == "cy.get('ul > li').click()"
        assert result.complete
    
    def test_combinator_with_second_placeholder(self, resolver):
        result = resolver.resolve("<click_ul > li> <assert_#t has text Hi>")
        assert result.text == (
            "cy.get('ul > li').click() "
            "cy.get('#t').should('contain.text', 'Hi')"
        )
        assert result.complete
    
    def test_generated_combinator_leaves_earlier_placeholder_intact(self, resolver):
        """Click resolves before assert; its snippet's ">" must not bleed into assert."""
        result = resolver.resolve("<assert_#t has text Hi> <click_ul > li>")
        assert result.text == (
            "cy.get('#t').should('contain.text', 'Hi') "
            "cy.get('ul > li').click()"
        )
        assert result.complete


class TestUnresolved:
    """Recognised families with unknown arguments pass through."""
    
    def test_passthrough(self, resolver):
        result = resolver.resolve("<visit_homepage>")
        
        assert result.text == "<visit_homepage>"
        assert not result.complete
        assert result.unresolved[0].family == FamilyTag.VISIT
        assert result.unresolved[0].text == "<visit_homepage>"
        assert result.unresolved[0].statement == "<visit_homepage>"
    
    def test_scan_continues_past_unresolved(self, resolver):
        """An unresolved occurrence doesn't stop later ones of the same family."""
        result = resolver.resolve("<visit_home> <visit_url http://x>")
        assert result.text == "<visit_home> cy.visit('http://x')"
        assert len(result.unresolved) == 1
    
    def test_close_marker_is_unresolved(self, resolver):
        result = resolver.resolve("<if_end>")
        assert result.text == "<if_end>"
        assert result.unresolved[0].family == FamilyTag.IF


class TestCustomFamilies:
    """Resolver honours the family list it is given."""
    
    def test_restricted_families(self):
        resolver = StatementResolver(families=[get_family(FamilyTag.CLICK)])
        assert resolver.resolve_text("<visit_url http://x> <click_#a>") == (
            "<visit_url http://x> cy.get('#a').click()"
        )
