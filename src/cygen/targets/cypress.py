"""
Cypress target — The downstream test API as string builders.

Nothing here knows about placeholders or scenarios. Each function
returns one fragment of Cypress/JavaScript source text.
"""

REFERENCE_DIRECTIVE = '/// <reference types="cypress" />'


def js_string(value: str) -> str:
    """Render a single-quoted JavaScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


# =============================================================================
# COMMAND CHAINS
# =============================================================================

def visit(url: str) -> str:
    return f"cy.visit({js_string(url)})"


def get(selector: str) -> str:
    return f"cy.get({js_string(selector)})"


def contains(chain: str, text: str) -> str:
    return f"{chain}.contains({js_string(text)})"


def click(chain: str) -> str:
    return f"{chain}.click()"


def type_text(chain: str, text: str) -> str:
    return f"{chain}.type({js_string(text)})"


def select(chain: str, value: str) -> str:
    return f"{chain}.select({js_string(value)})"


def check(chain: str) -> str:
    return f"{chain}.check()"


def uncheck(chain: str) -> str:
    return f"{chain}.uncheck()"


def should(chain: str, chainer: str, *args: str) -> str:
    """Append a ``.should(chainer, ...args)`` assertion."""
    rendered = ", ".join(js_string(part) for part in (chainer, *args))
    return f"{chain}.should({rendered})"


def on_alert_equals(text: str) -> str:
    """Listen for ``window:alert`` and assert its exact text."""
    return (
        "cy.on('window:alert', (alertText) => { "
        f"expect(alertText).to.equal({js_string(text)}); "
        "});"
    )


# =============================================================================
# BLOCK STRUCTURE
# =============================================================================

def if_open(condition: str) -> str:
    return f"if ({condition}) {{"


def if_close() -> str:
    return "}"


def describe_open(name: str) -> str:
    return f"describe({js_string(name)}, () => {{"


def it_open(title: str) -> str:
    return f"it({js_string(title)}, () => {{"


def callback_close() -> str:
    return "});"
