"""
Pattern Registry — Every placeholder the compiler understands.

Families are tried in declaration order and the first family whose
outer shape matches wins; inside a family the first sub-pattern wins.
The table is built once at import and never mutated.
"""

import re

from cygen.vocabulary import FamilyTag
from cygen.targets import cypress as cy
from cygen.patterns.models import PlaceholderFamily, SubPattern


def _shape(tag: FamilyTag) -> re.Pattern[str]:
    # The closing ">" is the last one before the next "<" or the end of text,
    # so "ul > li" stays one argument and several placeholders can share a line
    return re.compile(rf"<{tag.value}_(.+?)>(?=[^<>]*(?:<|$))")


def _sub(matcher: str, template: str, code) -> SubPattern:
    return SubPattern(matcher=re.compile(matcher), template=template, code=code)


# =============================================================================
# FAMILY DEFINITIONS
# =============================================================================

END_FAMILY = PlaceholderFamily(
    tag=FamilyTag.END,
    shape=re.compile(r"<(end)>"),
    description="Null marker; renders to nothing",
    sub_patterns=(
        _sub(r"end", "<end>", lambda: ""),
    ),
)

VISIT_FAMILY = PlaceholderFamily(
    tag=FamilyTag.VISIT,
    shape=_shape(FamilyTag.VISIT),
    description="Navigate to a URL",
    sub_patterns=(
        _sub(r"url (.+)", "<visit_url [url]>", lambda url: cy.visit(url)),
    ),
)

INPUT_FAMILY = PlaceholderFamily(
    tag=FamilyTag.INPUT,
    shape=_shape(FamilyTag.INPUT),
    description="Type into an input located by class",
    sub_patterns=(
        _sub(
            r"(.+) value (.+)",
            "<input_[selector] value [value]>",
            lambda name, value: cy.type_text(cy.get(f"input.{name}"), value),
        ),
    ),
)

CLICK_FAMILY = PlaceholderFamily(
    tag=FamilyTag.CLICK,
    shape=_shape(FamilyTag.CLICK),
    description="Click any selector",
    sub_patterns=(
        _sub(r"(.+)", "<click_[selector]>", lambda sel: cy.click(cy.get(sel))),
    ),
)

BUTTON_FAMILY = PlaceholderFamily(
    tag=FamilyTag.BUTTON,
    shape=_shape(FamilyTag.BUTTON),
    description="Submit and cancel buttons",
    sub_patterns=(
        _sub(
            r"submit (.+)",
            "<button_submit [selector]>",
            lambda sel: cy.click(cy.get(f'button[type="submit"].{sel}')),
        ),
        _sub(
            r"cancel (.+)",
            "<button_cancel [selector]>",
            lambda sel: cy.click(cy.get(f'button[type="button"].{sel}')),
        ),
    ),
)

IF_FAMILY = PlaceholderFamily(
    tag=FamilyTag.IF,
    shape=_shape(FamilyTag.IF),
    description="Conditional guards; open a scope in when/then lists",
    sub_patterns=(
        _sub(
            r"(.+) exists",
            "<if_[selector] exists>",
            lambda sel: cy.should(cy.get(sel), "exist"),
        ),
        _sub(
            r"(.+) does not exist",
            "<if_[selector] does not exist>",
            lambda sel: cy.should(cy.get(sel), "not.exist"),
        ),
        _sub(
            r"(.+) is visible",
            "<if_[selector] is visible>",
            lambda sel: cy.should(cy.get(sel), "be.visible"),
        ),
        _sub(
            r"(.+) is hidden",
            "<if_[selector] is hidden>",
            lambda sel: cy.should(cy.get(sel), "not.be.visible"),
        ),
        _sub(
            r"(.+) is enabled",
            "<if_[selector] is enabled>",
            lambda sel: cy.should(cy.get(sel), "not.be.disabled"),
        ),
        _sub(
            r"(.+) is disabled",
            "<if_[selector] is disabled>",
            lambda sel: cy.should(cy.get(sel), "be.disabled"),
        ),
        _sub(
            r"(.+) has (.+) as (.+)",
            "<if_[selector] has [css_property] as [css_value]>",
            lambda sel, prop, value: cy.should(cy.get(sel), "have.css", prop, value),
        ),
        _sub(
            r"(.+) has (.+) attribute with value (.+)",
            "<if_[selector] has [attribute] attribute with value [value]>",
            lambda sel, attr, value: cy.should(cy.get(sel), "have.attr", attr, value),
        ),
        _sub(
            r"(.+) has class (.+)",
            "<if_[selector] has class [selector]>",
            lambda sel, cls: cy.should(cy.get(sel), "have.class", cls),
        ),
    ),
)

SELECTOR_FAMILY = PlaceholderFamily(
    tag=FamilyTag.SELECTOR,
    shape=_shape(FamilyTag.SELECTOR),
    description="Locate elements by text or name",
    sub_patterns=(
        _sub(
            r"button (.+)",
            "<selector_button [text]>",
            lambda text: cy.contains(cy.get("button"), text),
        ),
        _sub(
            r"hyperlink (.+)",
            "<selector_hyperlink [text]>",
            lambda text: cy.contains(cy.get("a"), text),
        ),
        _sub(
            r"input (.+)",
            "<selector_input [name]>",
            lambda name: cy.get(f'input[name="{name}"]'),
        ),
    ),
)

ELEMENT_FAMILY = PlaceholderFamily(
    tag=FamilyTag.ELEMENT,
    shape=_shape(FamilyTag.ELEMENT),
    description="Structural elements by css class",
    sub_patterns=(
        _sub(r"table (.+)", "<element_table [css_name]>", lambda c: cy.get(f"table.{c}")),
        _sub(r"list (.+)", "<element_list [css_name]>", lambda c: cy.get(f"ul.{c}")),
        _sub(
            r"list_item (.+)",
            "<element_list_item [css_name]>",
            lambda c: cy.get(f"li.{c}"),
        ),
    ),
)

ACTION_FAMILY = PlaceholderFamily(
    tag=FamilyTag.ACTION,
    shape=_shape(FamilyTag.ACTION),
    description="User actions on a selector",
    sub_patterns=(
        _sub(
            r"type (.+) into (.+)",
            "<action_type [css_name] into [text]>",
            lambda text, sel: cy.type_text(cy.get(sel), text),
        ),
        _sub(
            r"select (.+) from (.+)",
            "<action_select [css_name] from [text]>",
            lambda value, sel: cy.select(cy.get(sel), value),
        ),
        _sub(
            r"check (.+)",
            "<action_check [css_name]>",
            lambda sel: cy.check(cy.get(sel)),
        ),
        _sub(
            r"uncheck (.+)",
            "<action_uncheck [css_name]>",
            lambda sel: cy.uncheck(cy.get(sel)),
        ),
    ),
)

ASSERT_FAMILY = PlaceholderFamily(
    tag=FamilyTag.ASSERT,
    shape=_shape(FamilyTag.ASSERT),
    description="Assertions on text and checkbox state",
    sub_patterns=(
        _sub(
            r"(.+) has text (.+)",
            "<assert_[css_name] has text [text]>",
            lambda sel, text: cy.should(cy.get(sel), "contain.text", text),
        ),
        _sub(
            r"(.+) is checked",
            "<assert_[css_name] is checked>",
            lambda sel: cy.should(cy.get(sel), "be.checked"),
        ),
        _sub(
            r"(.+) is unchecked",
            "<assert_[css_name] is unchecked>",
            lambda sel: cy.should(cy.get(sel), "not.be.checked"),
        ),
    ),
)

ALERT_FAMILY = PlaceholderFamily(
    tag=FamilyTag.ALERT,
    shape=_shape(FamilyTag.ALERT),
    description="Browser alert text",
    sub_patterns=(
        _sub(
            r"contains text (.+)",
            "<alert_contains text [text]>",
            lambda text: cy.on_alert_equals(text),
        ),
    ),
)


# =============================================================================
# REGISTRY
# =============================================================================

PLACEHOLDER_FAMILIES: tuple[PlaceholderFamily, ...] = (
    END_FAMILY,
    VISIT_FAMILY,
    INPUT_FAMILY,
    CLICK_FAMILY,
    BUTTON_FAMILY,
    IF_FAMILY,
    SELECTOR_FAMILY,
    ELEMENT_FAMILY,
    ACTION_FAMILY,
    ASSERT_FAMILY,
    ALERT_FAMILY,
)

_BY_TAG: dict[FamilyTag, PlaceholderFamily] = {
    family.tag: family for family in PLACEHOLDER_FAMILIES
}


def get_family(tag: FamilyTag) -> PlaceholderFamily:
    """Get a placeholder family by tag."""
    return _BY_TAG[tag]


def get_all_families() -> list[PlaceholderFamily]:
    """Get all families in resolution order."""
    return list(PLACEHOLDER_FAMILIES)


def match_family(token: str) -> PlaceholderFamily | None:
    """First family whose outer shape matches a full ``<...>`` token."""
    for family in PLACEHOLDER_FAMILIES:
        if family.accepts_token(token):
            return family
    return None


def find_sub_pattern(tag: FamilyTag, argument: str) -> SubPattern | None:
    """First sub-pattern of the family accepting the argument, or None."""
    return get_family(tag).find_sub_pattern(argument)


def iter_templates() -> list[str]:
    """Every diagnostic template across all families, in registry order."""
    return [template for family in PLACEHOLDER_FAMILIES for template in family.templates()]
