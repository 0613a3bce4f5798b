"""
Scenario — The given/when/then record submitted for compilation.

Single-string ``when``/``then`` values are normalised to one-element
lists. Structural problems surface as ScenarioStructureError before any
statement is looked at.
"""

from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cygen.errors import ScenarioStructureError
from cygen.vocabulary import StatementSection


class Scenario(BaseModel):
    """
    One test scenario.
    
    Immutable once built; the compiler never rewrites it.
    """
    model_config = ConfigDict(frozen=True)
    
    name: str = Field(..., description="Test suite name")
    given: str = Field(..., description="Setup statement, also the test case title")
    when: list[str] = Field(..., description="Ordered action statements")
    then: list[str] = Field(..., description="Ordered assertion statements")
    
    @field_validator("when", "then", mode="before")
    @classmethod
    def wrap_single_statement(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]
        return v
    
    @field_validator("name", "given")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v
    
    @field_validator("when", "then")
    @classmethod
    def at_least_one(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("must have at least one item")
        return v
    
    def statements(self) -> Iterator[tuple[StatementSection, str]]:
        """Every raw statement in order: given, then each when, then each then."""
        yield StatementSection.GIVEN, self.given
        for statement in self.when:
            yield StatementSection.WHEN, statement
        for statement in self.then:
            yield StatementSection.THEN, statement
    
    @property
    def statement_count(self) -> int:
        return 1 + len(self.when) + len(self.then)


def _describe(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "scenario"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


def load_scenario(data: Any) -> Scenario:
    """
    Build a Scenario from a mapping.
    
    Raises:
        ScenarioStructureError: missing given/when/then, empty lists,
            or a value of the wrong type
    """
    if isinstance(data, Scenario):
        return data
    if not isinstance(data, dict):
        raise ScenarioStructureError(
            'A scenario must have "given", "when", and "then" properties'
        )
    try:
        return Scenario.model_validate(data)
    except ValidationError as e:
        raise ScenarioStructureError(f"Invalid scenario: {_describe(e)}") from e


def load_scenarios(data: Any) -> list[Scenario]:
    """Build scenarios from one mapping or a list of mappings."""
    if isinstance(data, list):
        if not data:
            raise ScenarioStructureError("No scenarios provided")
        return [load_scenario(item) for item in data]
    return [load_scenario(data)]
